
CONFIG = {
    "WIDTH": 300,
    "HEIGHT": 600,
    "CELL_SIZE": 30,
    "FPS": 10,
    "ROTATION_CHECK": True,
    "LOG_LEVEL": "INFO",
}

BLACK = (0, 0, 0)

from checkerboard.utils.config import load_config

from .env import inject_env
from .log import enable


@inject_env()
class Settings:
    # emit debug / trace records from the geometry pipeline
    squircle_debug: bool = False
    # default number of decimals in serialized paths
    squircle_precision: int = 4


enable(Settings.squircle_debug)

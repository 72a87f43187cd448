import os
from pathlib import Path
from typing import Any, Mapping, get_args, get_origin

import dotenv

from .log import logger_wrapper


def _construct_parser(type):
    if get_origin(type) is list:
        vt = get_args(type)[0]
        return lambda v: [vt(_) for _ in v.split(",")]
    if get_origin(type) is dict:
        kt, vt = get_args(type)
        return lambda v: {
            kt(k): vt(v)
            for k, v in (pair.split(":") for pair in v.split(","))
        }
    return type


def set_class_var_by_env(cls,
                         values: Mapping[str, str | None] | None = None
                         ) -> dict[str, Any]:
    """Set annotated class variables from the environment.

    `values` are consulted for keys missing from `os.environ`.
    """
    injected = {}
    for key, value_type in cls.__annotations__.items():
        if key.startswith("_"):
            continue
        env_value = os.getenv(key.upper(), None)
        if env_value is None and values is not None:
            env_value = values.get(key.upper())
        if env_value is None:
            # keep the class default, or None when there is none
            if not hasattr(cls, key):
                setattr(cls, key, None)
            injected[key] = getattr(cls, key)
            continue
        value_type = _construct_parser(value_type)
        setattr(
            cls, key,
            value_type(env_value)
            if value_type is not bool else env_value.lower() in {"true", "1"})
        injected[key] = getattr(cls, key)
    return injected


class EnvLoader:

    def __init__(self):
        self.logger = logger_wrapper("env")
        self.injected_cls = set()
        if os.getenv("ENVIRONMENT") == "dev":
            self.env_file = Path(".env.dev")
        else:
            self.env_file = Path(".env.prod")
        # read only, os.environ belongs to the host process
        self.values = dotenv.dotenv_values(self.env_file)

        self.history = {}

    def register(self, cls):
        self.injected_cls.add(cls)
        updated = set_class_var_by_env(cls, self.values)
        self.history.update(updated)

    def reload(self) -> dict[str, tuple[Any, Any]]:
        """Export the env file to `os.environ` and re-inject every
        registered class. Values in the file win over the environment.

        Returns:
            dict[str, tuple[Any, Any]]: changed keys as (previous, current).
        """
        dotenv.load_dotenv(self.env_file, override=True)
        self.values = dotenv.dotenv_values(self.env_file)
        new_inject = {}
        for cls in self.injected_cls:
            updated = set_class_var_by_env(cls, self.values)
            new_inject.update(updated)
        diff = {}
        for key, value in new_inject.items():
            prev_value = self.history.get(key, None)
            if prev_value != value:
                diff[key] = (prev_value, value)
        self.history = new_inject
        if diff:
            self.logger.info(f"Update from {self.env_file.name}: \n" +
                             ("\n".join(f"{k}: {v[0]} -> {v[1]}"
                                        for k, v in diff.items())))
        return diff


loader = EnvLoader()


def inject_env():

    def decorator(cls):
        loader.register(cls)
        return cls

    return decorator

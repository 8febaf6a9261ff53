""" Synchronizer configuration-layer """

from typing import Union
import os
from pytensils import config
from ntpsync.struct import config as config_


PATH: Union[str, os.PathLike] = os.path.abspath(os.path.join(os.path.expanduser('~'), '.ntpsync'))
FILE_NAME: str = 'config.json'
DTYPES: dict = {
    'sync': {
        'servers': 'list',
        'history': 'int',
        'sync_interval': 'int',
        'sync_timeout': 'int',
        'sync_on_creation': 'bool',
        'auto_start': 'bool'
    }
}


def exists() -> bool:
    """ Returns `True` when the synchronizer configuration file exists. """
    if os.path.isfile(
        os.path.abspath(os.path.join(PATH, FILE_NAME))
    ):
        return True
    else:
        return False


def create() -> config.Handler:
    """ Creates the synchronizer configuration file with default values and returns
    the contents as a `pytensils.config.Handler` object.
    """
    return save(config_.Config())


def get() -> config.Handler:
    """ Returns the contents of the synchronizer configuration as a
    `pytensils.config.Handler` object.
    """

    # Read the configuration file
    Config = config.Handler(
        path=PATH,
        file_name=FILE_NAME
    )

    # Validate
    Config.validate(DTYPES)

    return Config


def get_or_create() -> config.Handler:
    """ Creates or reads the synchronizer configuration file and returns the contents as
    a `pytensils.config.Handler` object.
    """
    if exists():
        return get()
    else:
        return create()


def save(sync_config: config_.Config) -> config.Handler:
    """ Saves the synchronizer configuration to `~/.ntpsync/config.json`.

    Parameters
    ----------
    sync_config: `ntpsync.struct.config.Config`
        An instance of an `ntpsync.struct.config.Config` object.
    """

    # Create the configuration-layer directory
    if not os.path.isdir(PATH):
        os.makedirs(PATH)

    # Create the configuration file
    Config = config.Handler(
        path=PATH,
        file_name=FILE_NAME,
        create=True
    )
    Config = Config.from_dict({'sync': sync_config.to_dict()})

    return Config


def delete():
    """ Deletes the synchronizer configuration file. """
    if exists():
        os.remove(os.path.join(PATH, FILE_NAME))


def get_config() -> config_.Config:
    """ Returns the synchronizer configuration as an `ntpsync.struct.config.Config` object,
    creating the configuration file with default values when it does not exist.
    """
    return config_.Config.from_config(get_or_create())

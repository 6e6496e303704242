# Configuration helpers and package metadata
#
# Qt-free utilities shared by the core modules and the Qt layer.
# Everything reads defaults through the module level ``config``
# (``import qturtle.utils_core as Utils``), loaded from the packaged
# qturtle.ini and then the user's ~/.qturtle overrides.

__all__ = [
    # Metadata
    "__version__", "__prg__", "__title__",
    # Paths
    "prgpath", "iniSystem", "iniUser",
    # Globals
    "config",
    # Functions
    "loadConfiguration", "saveConfiguration", "userChanges",
    "addSection",
    "getStr", "getInt", "getFloat", "getBool",
    "setBool", "setStr", "setInt", "setFloat",
]

import configparser
import logging
import os

__version__ = "1.0.0"
__prg__ = "qturtle"
__title__ = "Python Turtle Graphics"

prgpath = os.path.abspath(os.path.dirname(__file__))
iniSystem = os.path.join(prgpath, f"{__prg__}.ini")
iniUser = os.path.expanduser(f"~/.{__prg__}")

config = configparser.ConfigParser(interpolation=None)


def _newConfig():
    return configparser.ConfigParser(interpolation=None)


# -----------------------------------------------------------------------------
# Load configuration
# -----------------------------------------------------------------------------
def loadConfiguration(systemOnly=False):
    """Read the packaged defaults and, unless systemOnly, the user file.

    Returns:
        List of files that were actually read.
    """
    files = [iniSystem] if systemOnly else [iniSystem, iniUser]
    done = config.read(files)
    logging.debug("Configuration read from %s", ", ".join(done) or "nothing")
    return done


# -----------------------------------------------------------------------------
# Values that differ from the packaged defaults
# -----------------------------------------------------------------------------
def userChanges():
    defaults = _newConfig()
    defaults.read(iniSystem)

    changes = _newConfig()
    for section in config.sections():
        for item, value in config.items(section):
            if defaults.has_option(section, item) and defaults.get(section, item) == value:
                continue
            if not changes.has_section(section):
                changes.add_section(section)
            changes.set(section, item, value)
    return changes


# -----------------------------------------------------------------------------
# Save configuration file
# -----------------------------------------------------------------------------
def saveConfiguration():
    """Write the user overrides (only values changed from defaults)."""
    with open(iniUser, "w") as f:
        userChanges().write(f)
    logging.debug("Configuration saved to %s", iniUser)


# -----------------------------------------------------------------------------
# add section if it doesn't exist
# -----------------------------------------------------------------------------
def addSection(section):
    if not config.has_section(section):
        config.add_section(section)


# -----------------------------------------------------------------------------
def _get(section, name, default, convert):
    try:
        value = config.get(section, name)
    except (configparser.NoSectionError, configparser.NoOptionError):
        return default
    try:
        return convert(value)
    except ValueError:
        logging.debug("Bad value [%s] %s=%r, using %r", section, name, value, default)
        return default


# -----------------------------------------------------------------------------
def getStr(section, name, default=""):
    return _get(section, name, default, str)


def getInt(section, name, default=0):
    return _get(section, name, default, int)


def getFloat(section, name, default=0.0):
    return _get(section, name, default, float)


def _boolean(value):
    # same spellings ConfigParser.getboolean() accepts
    try:
        return config.BOOLEAN_STATES[value.strip().lower()]
    except KeyError:
        raise ValueError(value) from None


def getBool(section, name, default=False):
    return _get(section, name, default, _boolean)


# -----------------------------------------------------------------------------
def setBool(section, name, value):
    setStr(section, name, "1" if value else "0")


def setStr(section, name, value):
    addSection(section)
    config.set(section, name, str(value))


setInt = setStr
setFloat = setStr


loadConfiguration()

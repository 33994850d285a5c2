"""
Reading connection parameters from a configuration file.

The configuration file is JSON or YAML, one section per server::

    {
        "default": {
            "caldav_url": "https://cal.example.com/dav/",
            "caldav_user": "alice",
            "caldav_pass": "secret"
        },
        "work": {
            "inherits": "default",
            "caldav_url": "https://work.example.com/dav/"
        }
    }
"""
import json
import logging
import os
from typing import Any
from typing import Dict
from typing import Optional

log = logging.getLogger("caldavclient")


def config_section(config: Dict[str, Any], section: str = "default") -> Dict[str, Any]:
    """
    Returns the section, with the settings from the section it
    inherits from (recursively) filled in.
    """
    if section in config and "inherits" in config[section]:
        ret = config_section(config, config[section]["inherits"])
    else:
        ret = {}
    if section in config:
        ret.update(config[section])
    return ret


def read_config(fn: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Reads the configuration file fn.  If fn is not given, the first one
    found of the standard locations is used.  Returns None if no
    configuration file was found, an empty dict if it's broken.
    """
    if not fn:
        cfgdir = f"{os.environ.get('HOME', '/')}/.config"
        for config_file in (
            f"{cfgdir}/caldav/calendar.conf",
            f"{cfgdir}/caldav/calendar.yaml",
            f"{cfgdir}/caldav/calendar.json",
            f"{cfgdir}/calendar.conf",
            "/etc/calendar.conf",
            "/etc/caldav/calendar.conf",
        ):
            cfg = read_config(config_file)
            if cfg:
                return cfg
        return None

    try:
        with open(fn, "rb") as config_file:
            data = config_file.read()
    except FileNotFoundError:
        log.info("no config file found at %s" % fn)
        return None

    try:
        return json.loads(data)
    except json.decoder.JSONDecodeError:
        pass

    ## Late import, yaml is an optional dependency
    try:
        import yaml
    except ImportError:
        log.error(
            f"config file {fn} exists but is not valid json, and pyyaml is not installed."
        )
        return {}

    try:
        cfg = yaml.safe_load(data)
    except yaml.YAMLError:
        log.error(
            f"config file {fn} exists but is neither valid json nor yaml.  Check the syntax.",
            exc_info=True,
        )
        return {}
    if not isinstance(cfg, dict):
        log.error(f"config file {fn} should contain a mapping of sections")
        return {}
    return cfg

# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from cadence import configuration
from cadence.logger import configure_logging
from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.template.configuration import get_configuration_template
from cadence.view import state as view_state

logger = logging.getLogger(__name__)


def initialize(verbose: bool = False) -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_file()

    log_level = "WARNING"
    config_error = None
    try:
        config = CONFIGURATION_REPO.get_config()
        view_state.set_show_header(config["show_header"])
        log_level = config.get("log_level", log_level)
    except ValueError as e:
        config_error = e
    configure_logging("DEBUG" if verbose else log_level)

    # Commands that need the configuration report it and exit
    if config_error is not None:
        logger.warning(
            "Invalid configuration in %s: %s", configuration.APP_CONFIG_PATH, config_error
        )


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = get_configuration_template()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

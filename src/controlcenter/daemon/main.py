################################################################################
# File Name: main.py
# Purpose/Description: controlcenterd command-line entry point
# Author: Control Center Team
# Creation Date: 2026-10-17
# Copyright: (c) 2026 Control Center Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-17    | CC Team       | Initial implementation
# ================================================================================
################################################################################

"""
controlcenterd entry point.

The front-end re-invokes this executable through the escalation wrapper to
hand over a staged payload:

    pkexec controlcenterd --new-settings /tmp/tmpccsettings
    pkexec controlcenterd --new-profiles /tmp/tmpccprofiles

The exit code is the whole contract with the caller; anything non-zero
means the authoritative files were not knowingly changed.

Usage:
    controlcenterd --new-settings path/to/settings.json
    controlcenterd --new-profiles path/to/profiles.json --config my.json --verbose
"""

import argparse
import sys
from collections.abc import Sequence

from common.error_handler import ConfigurationError, handleError
from common.logging_config import getLogger, setupLogging

from ..config.loader import getConfigValue, loadAppConfig
from ..config.types import DEFAULT_CONFIG_PATH
from ..persistence.exceptions import (
    PayloadValidationError,
    PersistenceReadError,
    PersistenceWriteError,
)
from ..sync.helpers import createConfigHandlerFromConfig
from .helper import applyNewProfiles, applyNewSettings, requestDaemonReload

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_PAYLOAD_REJECTED = 2
EXIT_WRITE_ERROR = 3
EXIT_UNKNOWN_ERROR = 4


def parseArgs(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='controlcenterd',
        description='Adopt staged Control Center settings or profiles',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  controlcenterd --new-settings /tmp/tmpccsettings   Replace the settings
  controlcenterd --new-profiles /tmp/tmpccprofiles   Replace custom profiles
  controlcenterd --new-settings f.json --verbose     Run with debug logging
        '''
    )

    payload = parser.add_mutually_exclusive_group(required=True)
    payload.add_argument(
        '--new-settings',
        metavar='PATH',
        help='Staged settings file to adopt'
    )
    payload.add_argument(
        '--new-profiles',
        metavar='PATH',
        help='Staged custom profiles file to adopt'
    )

    parser.add_argument(
        '--config', '-c',
        default=DEFAULT_CONFIG_PATH,
        help=f'Path to configuration file (default: {DEFAULT_CONFIG_PATH})'
    )

    parser.add_argument(
        '--env-file', '-e',
        default=None,
        help='Path to environment file for ${VAR} placeholders'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (debug) logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s 1.0.0'
    )

    return parser.parse_args(argv)


def runHelper(config: dict, args: argparse.Namespace) -> None:
    """
    Adopt the staged payload named on the command line.

    Args:
        config: Validated configuration
        args: Parsed arguments

    Raises:
        PersistenceReadError, PayloadValidationError: Payload rejected
        PersistenceWriteError: Authoritative file not replaced
    """
    handler = createConfigHandlerFromConfig(config)

    if args.new_settings is not None:
        applyNewSettings(handler, args.new_settings)
    else:
        applyNewProfiles(handler, args.new_profiles)

    requestDaemonReload(getConfigValue(config, 'daemon.pidFile'))


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parseArgs(argv)

    logLevel = 'DEBUG' if args.verbose else 'INFO'
    setupLogging(level=logLevel)
    logger = getLogger(__name__)

    try:
        config = loadAppConfig(args.config, args.env_file)

        logFile = getConfigValue(config, 'logging.file')
        if logFile or not args.verbose:
            setupLogging(
                level=logLevel if args.verbose else getConfigValue(config, 'logging.level'),
                logFile=logFile
            )

        runHelper(config, args)
        logger.info("Staged payload adopted")
        return EXIT_SUCCESS

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    except (PersistenceReadError, PayloadValidationError) as e:
        logger.error(f"Payload rejected: {e}")
        return EXIT_PAYLOAD_REJECTED

    except PersistenceWriteError as e:
        logger.error(f"Write failed: {e}")
        return EXIT_WRITE_ERROR

    except Exception as e:
        handleError(e, reraise=False)
        logger.error(f"Unexpected error: {e}")
        return EXIT_UNKNOWN_ERROR


if __name__ == '__main__':
    sys.exit(main())

"""Support for command-line execution using `python -m term_gif`"""

from __future__ import annotations

import logging as _logging
import sys
from typing import List, Optional

from .exit_codes import FAILURE, INTERRUPTED, codes


def main(argv: Optional[List[str]] = None) -> int:
    """CLI execution entry-point"""
    from .config import init_config

    init_config()  # Must be called before anything else is imported from `.config`.

    # Delay loading of other modules till after user-config is loaded
    from . import cli, logging

    # Can't use "term_gif", since the logger's level is changed.
    # Otherwise, it would affect children of "term_gif".
    logger = _logging.getLogger("term-gif")
    logger.setLevel(_logging.INFO)

    try:
        exit_code = cli.main(argv)
    except KeyboardInterrupt:
        logging.log(
            "Session interrupted",
            logger,
            _logging.CRITICAL,
            # If logging has been successfully initialized
            file=logging.VERBOSE is not None,
            direct=bool(cli.args and (cli.args.verbose or cli.args.debug)),
        )
        if cli.args and cli.args.debug:
            raise
        return INTERRUPTED
    except Exception as e:
        logger.exception("Session terminated due to:")
        logging.log(
            "Session not ended successfully: "
            f"({type(e).__module__}.{type(e).__qualname__}) {e}",
            logger,
            _logging.CRITICAL,
            # If logging has been successfully initialized
            file=logging.VERBOSE is not None,
        )
        if cli.args and cli.args.debug:
            raise
        return FAILURE
    else:
        logger.info(f"Session ended with return-code {exit_code} ({codes[exit_code]})")
        return exit_code


if __name__ == "__main__":
    sys.exit(main())

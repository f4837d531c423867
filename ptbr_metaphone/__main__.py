"""Package entry point for ``python -m ptbr_metaphone``.

HOW: Checks sys.argv for the ``--serve`` flag. If present, starts the
HTTP API with uvicorn. Otherwise, delegates to the CLI's main() function.
"""

import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        from ptbr_metaphone.server.app import run_api
        run_api()
    else:
        from ptbr_metaphone.cli import main
        main()

import sys
from typing import NoReturn

import colorama

from edkey.cli.args import argparse
from edkey.cli.bench import main_bench
from edkey.cli.keygen import main_keygen, main_shared

modes = {
  "keygen": main_keygen,
  "shared": main_shared,
  "bench": main_bench,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider using edkey.Key and edkey.elliptic directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Invalid keys or other errors in input

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()

  # Run the mode-specific main function
  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()

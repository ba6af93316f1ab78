import sys

from edkey.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.identities = []
    self.recipients = []
    self.rounds = "100"
    self.debug = None


keygenargs = dict(debug='--debug'.split(),)

sharedargs = dict(
  identities='-i --identity'.split(),
  recipients='-r --recipient'.split(),
  debug='--debug'.split(),
)

benchargs = dict(
  rounds='-n --rounds'.split(),
  debug='--debug'.split(),
)

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('keygen', 'genkey', '-k'): return 'keygen', keygenargs
  if arg in ('shared', 'dh'): return 'shared', sharedargs
  if arg in ('bench', 'benchmark'): return 'bench', benchargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing in the same manner as the rest of our tools
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('-v', '--version') for a in av):
    print_version()

  args = Args()
  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode)

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (keygen/shared/bench/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  shortargs = [flag[1:] for switches in ad.values() for flag in switches if not flag.startswith("--")]
  for a in aiter:
    aprint = a
    if not a.startswith('-') or a == '-':
      print_help(args.mode, f' 💣  Unexpected argument: edkey {args.mode} {a}')
    if a.startswith('--'):
      a = a.lower()
    if not a.startswith('--') and len(a) > 2:
      if any(arg not in shortargs for arg in list(a[1:])):
        falseargs = [arg for arg in list(a[1:]) if arg not in shortargs]
        print_help(args.mode, f' 💣  Unknown argument: edkey {args.mode} {a} (failing -{" -".join(falseargs)})')
      a = [f'-{shortarg}' for shortarg in list(a[1:])]
    if isinstance(a, str):
      a = [a]
    for flag in a:
      argvar = next((k for k, v in ad.items() if flag in v), None)
      if argvar is None:
        print_help(args.mode, f' 💣  Unknown argument: edkey {args.mode} {aprint}')
      try:
        var = getattr(args, argvar)
        if isinstance(var, list):
          var.append(next(aiter))
        elif isinstance(var, str):
          setattr(args, argvar, next(aiter))
        else:
          setattr(args, argvar, True)
      except StopIteration:
        print_help(args.mode, f' 💣  Argument parameter missing: edkey {args.mode} {aprint} …')

  return args

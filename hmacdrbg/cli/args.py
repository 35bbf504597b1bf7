import sys

from hmacdrbg.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.entropy = ""
    self.nonce = ""
    self.personalization = ""
    self.additional = []
    self.bytes = ""
    self.count = ""
    self.hash = ""
    self.minentropy = ""
    self.state = None
    self.key = ""
    self.digest = ""
    self.curve = ""
    self.order = ""
    self.debug = None


genargs = dict(
  entropy='-e --entropy'.split(),
  nonce='-n --nonce'.split(),
  personalization='-p --pers --personalization'.split(),
  additional='-a --add --additional'.split(),
  bytes='-b --bytes'.split(),
  count='-c --count'.split(),
  hash='-H --hash'.split(),
  minentropy='-m --min-entropy'.split(),
  state='-s --state'.split(),
  debug='--debug'.split(),
)

nonceargs = dict(
  key='-k --key'.split(),
  digest='-d --digest'.split(),
  curve='-C --curve'.split(),
  order='-q --order'.split(),
  personalization='-p --extra'.split(),
  hash='-H --hash'.split(),
  debug='--debug'.split(),
)

benchargs = dict(debug='--debug'.split(),)

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    # Short flags are case sensitive, -H selects the hash
    if a == '-h' or a.lower() == '--help': return True
  return False

def subcommand(arg):
  if arg in ('gen', 'generate'): return 'gen', genargs
  if arg in ('nonce', ): return 'nonce', nonceargs
  if arg in ('bench', 'benchmark'): return 'bench', benchargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing for combined short flags and repeatable options
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a == '-v' or a.lower() == '--version' for a in av):
    print_version()

  args = Args()
  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (gen/nonce/bench/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  shortargs = [flag[1:] for switches in ad.values() for flag in switches if not flag.startswith("--")]
  for a in aiter:
    aprint = a
    if a == '--' or not a.startswith('-'):
      print_help(args.mode, f' 💣  Unexpected argument: hmacdrbg {args.mode} {aprint}')
    if a.startswith('--'):
      a = [a.lower()]
    elif len(a) > 2:
      if (falseargs := [arg for arg in a[1:] if arg not in shortargs]):
        print_help(args.mode, f' 💣  Unknown argument: hmacdrbg {args.mode} {a} (failing -{" -".join(falseargs)})')
      a = [f'-{shortarg}' for shortarg in a[1:]]
    else:
      a = [a]
    for flag in a:
      argvar = next((k for k, v in ad.items() if flag in v), None)
      if argvar is None:
        print_help(args.mode, f' 💣  Unknown argument: hmacdrbg {args.mode} {aprint}')
      try:
        var = getattr(args, argvar)
        if isinstance(var, list):
          var.append(next(aiter))
        elif isinstance(var, str):
          setattr(args, argvar, next(aiter))
        else:
          setattr(args, argvar, True)
      except StopIteration:
        print_help(args.mode, f' 💣  Argument parameter missing: hmacdrbg {args.mode} {aprint} …')

  return args

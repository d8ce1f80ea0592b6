"""Echo: one handler registered for every action/resource pair.

Prints whatever the command carried, which makes it a handy smoke test
for the CLI flags.

Run:
    python -m climan run app add numbers 1 2 3 -d payload -p 2 -v   (from this directory)
"""

from climan import CommandArgs, Dispatcher

dispatcher = Dispatcher()


def echo(args: CommandArgs) -> None:
    print(f"Action: {args.action}, Resource: {args.resource}, Values: {list(args.values)}")
    if args.data is not None:
        print(f"Data: {args.data}")
    if args.page is not None:
        print(f"Page: {args.page}")
    if args.skip is not None:
        print(f"Skip: {args.skip}")
    if args.verbose:
        print("Verbose mode enabled")
    if args.output is not None:
        print(f"Output: {args.output}")
    if args.silent:
        print("Silent mode enabled")


dispatcher.register_all(echo)

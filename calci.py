from calc.tools import Tools
from calc.session import Session
from calc.reporter import Reporter

def main(argv = None):
    """
    usage:
    python3 calci.py [--trace] [--env] [<filename> | -e <expr> ...]

    evaluates one expression per line, variables live for the whole run
    without a file or -e it reads lines from the prompt until EOF
    """
    # preliminary objects
    reporter    = Reporter()
    tools       = Tools(reporter)

    # parse args
    args        = tools.parseargs(argv)
    session     = Session(reporter, trace = args.trace)

    for number, line in enumerate(tools.lines(args), start = 1):
        if not line.strip():
            continue

        reporter.checkpoint(f"line {number}")
        value = session.run(line)
        if value is not None:
            print(value.pprint())
        reporter.flush()

    reporter.checkpoint()

    if args.env and len(session.environment):
        print(session.environment.pprint())

    if reporter.failed and not tools.interactive(args):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

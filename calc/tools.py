import argparse
import os
import sys

class Tools:
    def __init__(self, reporter):
        self.reporter = reporter

    def parseargs(self, argv = None):
        """
        return the parsed command line
        """
        parser = argparse.ArgumentParser(
            prog        = os.path.basename(sys.argv[0]),
            description = 'evaluate one-line arithmetic and boolean expressions',
        )

        parser.add_argument('input', nargs = '?',
                            help = 'file with one expression per line')
        parser.add_argument('-e', '--expression', action = 'append', dest = 'expressions',
                            metavar = 'EXPR', help = 'evaluate EXPR (can be repeated)')
        parser.add_argument('--trace', action = 'store_true',
                            help = 'print the tokens and postfix form of each line')
        parser.add_argument('--env', action = 'store_true',
                            help = 'print the variables when done')

        aout = parser.parse_args(argv)

        if aout.input and aout.expressions:
            parser.error('give either an input file or -e expressions, not both')

        return aout

    def lines(self, args):
        """
        yield the lines to evaluate, from -e, from a file or interactively
        """
        if args.expressions:
            yield from args.expressions

        elif args.input:
            try:
                with open(args.input, "r") as f:
                    for line in f:
                        yield line.rstrip("\n")
            except IOError as e:
                self.reporter.crash(f"cannot read input file {args.input}: {e}")

        else:
            while True:
                try:
                    yield input("> ")
                except EOFError:
                    print()
                    return

    def interactive(self, args):
        return not (args.expressions or args.input)

import sys

from fsshell.cli_shell import interactive_main


def main():
    # Same flags as the `fsshell` console script
    sys.exit(interactive_main(sys.argv[1:]))


if __name__ == "__main__":
    main()

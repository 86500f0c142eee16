import argparse
import sys
import textwrap
from pathlib import Path

from rich.markup import escape

from .bootstrap import Bootstrap
from .cache import DefaultCacheLayout
from .config import LoadSettings
from .errors import LicenseError
from .generate import GenerateLicense
from .listing import ListLocal, ListRemote
from .provider import GithubLicenseProvider
from .reporting import Reporter


def BuildArgumentParser() -> argparse.ArgumentParser:

    argumentParser = argparse.ArgumentParser(
        prog="getlicense",
        description="Manage a local cache of license templates from the GitHub licenses API.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=textwrap.dedent(
            """\
    Examples:
      %(prog)s bootstrap -v
      %(prog)s ls
      %(prog)s ls-remote
      %(prog)s generate mit -n "Jane Doe" -o LICENSE
    """
        ),
    )
    argumentParser.add_argument(
        "--config", type=Path, metavar="PATH", help="YAML config file."
    )
    commands = argumentParser.add_subparsers(dest="command", required=True)

    bootstrapParser = commands.add_parser(
        "bootstrap", help="Refresh the local cache from the remote index."
    )
    bootstrapParser.add_argument(
        "-q", "--quiet", action="store_true", help="Only print errors."
    )
    bootstrapParser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose output."
    )

    commands.add_parser("ls", help="List locally cached licenses.")
    commands.add_parser("ls-remote", help="List licenses available remotely.")

    generateParser = commands.add_parser(
        "generate", help="Write a license from a cached template."
    )
    generateParser.add_argument("key", metavar="ID", help="License key (e.g. mit).")
    generateParser.add_argument("-n", "--name", help="Full name of the copyright owner.")
    generateParser.add_argument("-y", "--year", help="Year (def: current).")
    generateParser.add_argument("-p", "--project", help="Project name.")
    generateParser.add_argument("-e", "--email", help="Email.")
    generateParser.add_argument("-u", "--projecturl", help="Project URL.")
    generateParser.add_argument(
        "-o", "--output", type=Path, default=Path("LICENSE"), help="Output file (def: LICENSE)."
    )

    return argumentParser


def main(argv: list[str] | None = None) -> int:

    parsedArgs = BuildArgumentParser().parse_args(argv)
    reporter = Reporter(
        quiet=getattr(parsedArgs, "quiet", False),
        verbose=getattr(parsedArgs, "verbose", False),
    )

    try:
        settings = LoadSettings(parsedArgs.config)

        if parsedArgs.command == "bootstrap":
            cache = DefaultCacheLayout(settings.cacheDir)
            licenses = Bootstrap(GithubLicenseProvider(settings), cache, reporter)
            reporter.Info(
                f"Synced [blue]{len(licenses)}[/blue] licenses to [green]{escape(str(cache.root))}[/green]"
            )

        elif parsedArgs.command == "ls":
            ListLocal(DefaultCacheLayout(settings.cacheDir))

        elif parsedArgs.command == "ls-remote":
            ListRemote(GithubLicenseProvider(settings))

        elif parsedArgs.command == "generate":
            values = {
                "fullname": parsedArgs.name,
                "year": parsedArgs.year,
                "project": parsedArgs.project,
                "email": parsedArgs.email,
                "projecturl": parsedArgs.projecturl,
            }
            unfilled = GenerateLicense(
                DefaultCacheLayout(settings.cacheDir),
                parsedArgs.key,
                values,
                parsedArgs.output,
            )
            reporter.Info(
                f"--- [bold]{escape(parsedArgs.key)}[/bold] written to [green]{escape(str(parsedArgs.output))}[/green] ---"
            )

            for field in sorted(unfilled):
                reporter.Info(
                    f"[yellow]Warn:[/yellow] placeholder '{escape(field)}' remains in file"
                )

    except LicenseError as e:
        reporter.Error(str(e))

        return 1

    return 0


if __name__ == "__main__":

    sys.exit(main())

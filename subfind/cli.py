"""
subfind - find subdomains of a domain using public passive sources

Usage:
    subfind <domain>                    Print unique subdomains, one per line
    subfind <domain> --subs-only        Only print names under <domain>
    subfind <domain> -c config.json     Override source settings
    subfind --list-sources              Show registered sources

Examples:
    subfind example.com
    FB_APP_ID=... FB_APP_SECRET=... subfind example.com -v
"""

import argparse
import sys

from .core import console
from .core.config import ConfigManager
from .passive import SOURCES, build_tools
from .passive.runner import run_passive


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='subfind',
        description='Find subdomains using passive public sources',
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('domain', nargs='?', default='', help='Target domain')
    parser.add_argument('-c', '--config', help='JSON config file')
    parser.add_argument('--subs-only', action='store_true',
                        help='Only output names that are the domain or under it')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print progress to stderr')
    parser.add_argument('--list-sources', action='store_true',
                        help='List sources and whether they are enabled')
    return parser


def cmd_list_sources(config: ConfigManager):
    for tool_class in SOURCES:
        tool = tool_class(config.source_config(tool_class.name))
        status = "enabled" if tool.is_enabled() else "disabled"
        print(f"{tool.name}: {status}")


def cmd_find(domain: str, config: ConfigManager, subs_only: bool = False):
    tools = build_tools(config)
    if not tools:
        console.error("no sources enabled")
        return

    for name in run_passive(domain, tools, subs_only=subs_only):
        print(name, flush=True)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    console.set_verbose(args.verbose)

    try:
        if args.list_sources:
            cmd_list_sources(ConfigManager(args.config))
            return 0

        domain = args.domain.strip()
        if not domain:
            print("no domain specified")
            return 0

        cmd_find(domain, ConfigManager(args.config), subs_only=args.subs_only)
    except KeyboardInterrupt:
        print("\n[!] Interrupted", file=sys.stderr)
        return 1
    except ValueError as e:
        # Bad config file
        console.error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())

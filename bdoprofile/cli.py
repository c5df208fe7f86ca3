"""Command line entry point for bdoprofile."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .app import ProfileViewerApp
from .config import settings
from .errors import ProfileError
from .fetcher import Fetcher
from .gearscore import summarize_folder
from .output import read_roster_csv, write_profile_json, write_roster_csv
from .scraper import ProfileScraper
from .terminal import stdin_is_terminal


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("bdoprofile", description="Black Desert family profile tools.")
    parser.add_argument("--base-url", default=None, help="Adventurer site origin.")
    parser.add_argument("--timeout", type=int, default=None, help="Request timeout in seconds.")
    subparsers = parser.add_subparsers(dest="command")

    view = subparsers.add_parser("view", help="Interactive profile search (default).")
    _add_view_arguments(view)
    _add_view_arguments(parser)

    average = subparsers.add_parser("average", help="Average gearscore over a folder of profile JSON files.")
    average.add_argument("folder", help="Folder holding one JSON profile per member.")

    guild = subparsers.add_parser("guild", help="Fetch a guild roster into <guild>/<guild>_members.csv.")
    guild.add_argument("guild_name", help="Guild name as shown on the site.")

    batch = subparsers.add_parser("batch", help="Fetch every profile listed in a roster CSV.")
    batch.add_argument("csv_path", help="CSV file with a Nickname,Ref header.")
    batch.add_argument("--output-dir", default=".", help="Where to write <nickname>.json files.")
    return parser


def _add_view_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--debug-output",
        default=argparse.SUPPRESS,
        help="Where to write the last fetched profile as JSON.",
    )
    parser.add_argument(
        "--no-debug-output",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Do not write the debug profile file.",
    )


def _scraper(args: argparse.Namespace) -> ProfileScraper:
    return ProfileScraper(fetcher=Fetcher(timeout=args.timeout), base_url=args.base_url)


def run_view(args: argparse.Namespace) -> int:
    if not stdin_is_terminal():
        print("[ERROR] The interactive viewer needs a POSIX terminal.")
        return 1
    debug_output = getattr(args, "debug_output", settings.debug_output)
    if getattr(args, "no_debug_output", False):
        debug_output = None
    ProfileViewerApp(scraper=_scraper(args), debug_output=debug_output).run()
    return 0


def run_average(args: argparse.Namespace) -> int:
    folder = Path(args.folder)
    if not folder.is_dir():
        print(f"[ERROR] Not a folder: {folder}")
        return 1
    summary = summarize_folder(folder)
    for line in summary.lines():
        print(line)
    return 0


def run_guild(args: argparse.Namespace) -> int:
    guild_name = args.guild_name
    members = _scraper(args).fetch_guild_members(guild_name)
    write_roster_csv(members, Path(guild_name) / f"{guild_name}_members.csv")
    print(f"Fetched guild members for: {guild_name}")
    print(f"Found {len(members)} members")
    return 0


def run_batch(args: argparse.Namespace) -> int:
    scraper = _scraper(args)
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    failures = 0
    for member in read_roster_csv(args.csv_path):
        try:
            profile = scraper.fetch_profile(member.url)
        except ProfileError as exc:
            print(f"[Batch] [{member.nickname}] error: {exc}")
            failures += 1
            continue

        out_file = output_dir / f"{member.nickname}.json"
        try:
            write_profile_json(profile, out_file)
        except OSError as exc:
            print(f"[Batch] [{member.nickname}] write error: {exc}")
            failures += 1
            continue
        print(f"[Batch] [{member.nickname}] written to {out_file}")

    return 1 if failures else 0


COMMANDS = {
    None: run_view,
    "view": run_view,
    "average": run_average,
    "guild": run_guild,
    "batch": run_batch,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        return COMMANDS[args.command](args)
    except (ProfileError, OSError) as exc:
        print(f"[ERROR] {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
pathtracker command line - Track learning progress from the terminal.

Usage:
  pathtracker init "Ada Lovelace"
  pathtracker init "Ada Lovelace" --curriculum full --output progress.json
  pathtracker show progress.json
  pathtracker update stage1-environment progress.json --action complete --score 92
  pathtracker recommend progress.json
  pathtracker export progress.json dashboard.html
  pathtracker add stage1-quiz "Stage 1 Quiz" --type assessment --stage stage1_basics
  pathtracker achievements progress.json
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from pathtracker import __version__
from pathtracker.schemas import (
    LearningStage,
    LearningUnit,
    LearningUnitType,
    ProgressTracker,
    StatusTransitionError,
    describe_condition,
    normalize_score,
)
from pathtracker.tracking import (
    CURRICULA,
    ProgressFileError,
    ProgressStore,
    check_achievements,
    create_tracker,
    generate_suggestions,
    get_progress_stats,
    recommend_learning_path,
)
from pathtracker.utils import configure_logging, load_dashboard_config
from pathtracker.viewer import (
    collect_dashboard_data,
    format_datetime,
    render_html_report,
    render_text_report,
)

logger = logging.getLogger(__name__)

PROGRESS_FILE_ENV_VAR = "PATHTRACKER_PROGRESS_FILE"
DEFAULT_EXPORT_FILE = "dashboard.html"
RULE = "━" * 80

ACTIONS = ("start", "complete", "skip")
PRIORITY_ICONS = ["🥇", "🥈", "🥉"]


class CommandError(Exception):
    """A user-facing failure; the message is printed and the exit status is 1."""


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def default_progress_file() -> Path:
    return Path(os.getenv(PROGRESS_FILE_ENV_VAR, "progress.json"))


def resolve_store(file_arg: Optional[str]) -> ProgressStore:
    return ProgressStore(Path(file_arg) if file_arg else default_progress_file())


def load_tracker(store: ProgressStore) -> ProgressTracker:
    try:
        return store.load()
    except ProgressFileError as e:
        hint = "\n💡 Run first: pathtracker init <learner_name>" if not store.exists() else ""
        raise CommandError(f"{e}{hint}") from e


def load_config(config_arg: Optional[str]):
    try:
        return load_dashboard_config(config_arg)
    except (OSError, ValueError, yaml.YAMLError) as e:
        # pydantic ValidationError is a ValueError
        raise CommandError(f"Cannot load dashboard config: {e}") from e


def prompt_action() -> Optional[str]:
    """Ask which transition to apply; None means cancel."""
    print("\n📋 Actions:")
    print("1. start")
    print("2. complete")
    print("3. skip")
    print("4. cancel")
    choice = input("Choose an action (1-4): ").strip().lower()
    mapping = {"1": "start", "2": "complete", "3": "skip", "4": None, "cancel": None}
    if choice in ACTIONS:
        return choice
    if choice in mapping:
        return mapping[choice]
    raise CommandError(f"Invalid choice: {choice}")


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------

def cmd_init(args: argparse.Namespace) -> int:
    tracker = create_tracker(args.learner_name, learner_id=args.id, curriculum=args.curriculum)
    output = Path(args.output) if args.output else Path(f"{tracker.learner_id}-progress.json")
    if output.exists() and not args.force:
        raise CommandError(f"{output} already exists (use --force to overwrite)")

    ProgressStore(output).save(tracker)
    logger.info(f"Created tracker {tracker.learner_id} at {output}")

    print(f"🎯 Learner: {tracker.learner_name} ({tracker.learner_id})")
    print(f"✅ Progress file created: {output}")
    print(
        f"📊 {len(tracker.learning_units)} learning units and "
        f"{len(tracker.achievements)} achievements"
    )
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    store = resolve_store(args.file)
    tracker = load_tracker(store)
    config = load_config(args.config)
    if args.width:
        config = config.model_copy(update={"progress_bar_width": args.width})
    print(render_text_report(collect_dashboard_data(tracker), config))
    return 0


def cmd_update(args: argparse.Namespace) -> int:
    store = resolve_store(args.file)
    tracker = load_tracker(store)

    unit = tracker.get_unit(args.unit_id)
    if unit is None:
        raise CommandError(f"Learning unit not found: {args.unit_id}")

    print(f"📝 Unit: {unit.name}")
    print(f"Current status: {unit.status.display_name}")

    action = args.action or prompt_action()
    if action is None:
        print("Cancelled.")
        return 0
    if args.score is not None and action != "complete":
        raise CommandError(f"--score only applies when completing a unit, not to '{action}'")

    try:
        if action == "start":
            tracker.start_unit(unit.id)
            print("✅ Unit started")
        elif action == "complete":
            raw_score = args.score
            if raw_score is None and args.action is None:
                raw_score = input("Score (0-100, optional): ")
            score = normalize_score(raw_score)
            if raw_score not in (None, "") and score is None:
                logger.warning(f"Ignoring invalid score for {unit.id}: {raw_score!r}")
            tracker.complete_unit(unit.id, score=score)
            if score is not None:
                print(f"✅ Unit completed with score {score:.1f}")
            else:
                print("✅ Unit completed")
        else:
            tracker.skip_unit(unit.id)
            print("✅ Unit skipped")
    except StatusTransitionError as e:
        raise CommandError(str(e)) from e

    newly_unlocked = check_achievements(tracker)
    if newly_unlocked:
        print("\n🎉 New achievements unlocked:")
        for achievement_id in newly_unlocked:
            achievement = tracker.get_achievement(achievement_id)
            print(f"  🏆 {achievement.name} - {achievement.description}")

    store.save(tracker)
    print(f"\n💾 Progress saved to: {store.path}")
    return 0


def cmd_recommend(args: argparse.Namespace) -> int:
    tracker = load_tracker(resolve_store(args.file))
    stats = get_progress_stats(tracker)
    recommendation = recommend_learning_path(tracker, stats)

    print("🎯 Learning Path Recommendation")
    print(RULE)
    print(f"Recommended stage: {recommendation.recommended_stage.display_name}")
    print(f"Confidence: {recommendation.confidence_score * 100:.1f}%")
    print(f"Estimated time: {recommendation.estimated_time_minutes} minutes")
    print(f"Reasoning: {recommendation.reasoning}")

    if recommendation.next_units:
        print("\n📚 Recommended units:")
        for i, unit in enumerate(recommendation.next_units):
            icon = PRIORITY_ICONS[i] if i < len(PRIORITY_ICONS) else "📖"
            print(
                f"  {icon} {unit.name} ({unit.id}, {unit.unit_type.display_name}, "
                f"{unit.estimated_time_minutes} minutes)"
            )

    suggestions = generate_suggestions(stats)
    if suggestions:
        print("\n💡 Suggestions:")
        for i, suggestion in enumerate(suggestions, start=1):
            print(f"  {i}. {suggestion}")
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    tracker = load_tracker(resolve_store(args.file))
    config = load_config(args.config)
    output = Path(args.out or DEFAULT_EXPORT_FILE)

    document = render_html_report(collect_dashboard_data(tracker), config)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")
    logger.info(f"Exported dashboard for {tracker.learner_id} to {output}")

    print(f"✅ HTML dashboard exported: {output}")
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    store = resolve_store(args.file)
    tracker = load_tracker(store)
    try:
        unit = LearningUnit(
            id=args.unit_id,
            name=args.name,
            unit_type=LearningUnitType(args.type),
            stage=LearningStage(args.stage),
            path=args.path or "",
            estimated_time_minutes=args.minutes,
        )
        tracker.add_unit(unit)
    except (ValidationError, ValueError) as e:
        raise CommandError(f"Cannot add unit: {e}") from e

    store.save(tracker)
    print(f"✅ Added {unit.unit_type.display_name} '{unit.name}' to {unit.stage.display_name}")
    return 0


def cmd_achievements(args: argparse.Namespace) -> int:
    tracker = load_tracker(resolve_store(args.file))
    print("🏆 Achievements")
    print(RULE)
    for achievement in tracker.achievements:
        if achievement.is_unlocked:
            state = f"unlocked {format_datetime(achievement.unlocked_at)}"
        else:
            state = "locked"
        print(f"{achievement.icon} {achievement.name} [{achievement.rarity.display_name}] - {state}")
        print(f"   {achievement.description} ({describe_condition(achievement.condition)})")
    return 0


# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtracker",
        description="Track learning progress, achievements and recommendations",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress information")
    parser.add_argument("--debug", action="store_true", help="Log debug information")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("init", help="Create a new progress file")
    p.add_argument("learner_name", help="Learner display name")
    p.add_argument("--id", help="Learner id (default: slug of the name)")
    p.add_argument("--curriculum", choices=sorted(CURRICULA), default="starter")
    p.add_argument("--output", help="Progress file to write (default: <learner-id>-progress.json)")
    p.add_argument("--force", action="store_true", help="Overwrite an existing file")
    p.set_defaults(func=cmd_init)

    p = subparsers.add_parser("show", help="Print the progress dashboard")
    p.add_argument("file", nargs="?", help="Progress file")
    p.add_argument("--config", help="Dashboard config YAML")
    p.add_argument("--width", type=int, help="Overall progress bar width")
    p.set_defaults(func=cmd_show)

    p = subparsers.add_parser("update", help="Start, complete or skip a unit")
    p.add_argument("unit_id")
    p.add_argument("file", nargs="?", help="Progress file")
    p.add_argument("--action", choices=ACTIONS, help="Transition to apply (prompted if omitted)")
    p.add_argument("--score", help="Score 0-100 when completing")
    p.set_defaults(func=cmd_update)

    p = subparsers.add_parser("recommend", help="Print recommended next units and suggestions")
    p.add_argument("file", nargs="?", help="Progress file")
    p.set_defaults(func=cmd_recommend)

    p = subparsers.add_parser("export", help="Write the HTML dashboard")
    p.add_argument("file", nargs="?", help="Progress file")
    p.add_argument("out", nargs="?", help=f"Output HTML file (default: {DEFAULT_EXPORT_FILE})")
    p.add_argument("--config", help="Dashboard config YAML")
    p.set_defaults(func=cmd_export)

    p = subparsers.add_parser("add", help="Add a learning unit")
    p.add_argument("unit_id")
    p.add_argument("name")
    p.add_argument("--type", required=True, choices=[t.value for t in LearningUnitType])
    p.add_argument("--stage", required=True, choices=[s.value for s in LearningStage])
    p.add_argument("--minutes", type=int, default=60)
    p.add_argument("--path", help="Content location")
    p.add_argument("file", nargs="?", help="Progress file")
    p.set_defaults(func=cmd_add)

    p = subparsers.add_parser("achievements", help="List achievements and their state")
    p.add_argument("file", nargs="?", help="Progress file")
    p.set_defaults(func=cmd_achievements)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        configure_logging("DEBUG")
    elif args.verbose:
        configure_logging("INFO")
    else:
        configure_logging()

    try:
        return args.func(args)
    except CommandError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        return 1


def main_entry():
    """Console script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    main_entry()

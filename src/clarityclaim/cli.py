"""Command-line interface for ClarityClaim."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from clarityclaim.config.settings import Settings
from clarityclaim.console.logger import ClaimsConsole
from clarityclaim.core.models import Claim, DenialInfo
from clarityclaim.orchestrator.service import ClaimsService
from clarityclaim.scoring import catalog
from clarityclaim.storage.claims_db import ClaimsDatabase


console = ClaimsConsole()


def _service(db_path: str | None, mock: bool) -> ClaimsService:
    settings = Settings()
    console.setup_logging(settings.log_level)
    claims_db = ClaimsDatabase(db_path or settings.storage.claims_db)
    return ClaimsService(settings, mock=mock, claims_db=claims_db)


async def assess_claim(
    claim_id: str | None,
    claim_file: str | None = None,
    db_path: str | None = None,
    mock: bool = False,
    as_json: bool = False,
) -> None:
    """Score a stored claim, or a claim read from a JSON file."""
    service = _service(db_path, mock)
    if claim_file:
        claim = Claim.model_validate_json(Path(claim_file).read_text(encoding="utf-8"))
        assessment = await service.assess(claim)
        label = claim.id or claim.claim_number or Path(claim_file).name
    else:
        assessment = await service.assess_claim(str(claim_id))
        label = str(claim_id)
    if as_json:
        console.print_json(assessment.to_payload())
        return
    console.print_header("assess", service.ai_configured)
    console.print_assessment(label, assessment)


async def generate_appeal(
    claim_id: str,
    reason: str | None = None,
    code: str | None = None,
    context: str | None = None,
    db_path: str | None = None,
    mock: bool = False,
    as_json: bool = False,
) -> None:
    """Draft and store an appeal for a denied claim."""
    service = _service(db_path, mock)
    denial = DenialInfo(denial_reason=reason, denial_code=code, additional_context=context)
    appeal = await service.generate_appeal(claim_id, denial)
    if as_json:
        console.print_json(appeal.model_dump(mode="json"))
        return
    console.print_header("appeal", service.ai_configured)
    console.print_appeal(appeal)


def show_patterns(status: str | None = None, db_path: str | None = None, as_json: bool = False) -> None:
    """Analyze denial patterns across stored claims."""
    service = _service(db_path, mock=False)
    report = service.analyze_patterns(status)
    if as_json:
        console.print_json(report.model_dump(mode="json"))
        return
    console.print_patterns(report)


def show_factors(as_json: bool = False) -> None:
    """Show the risk factor catalog."""
    factors = list(catalog.get_all())
    if as_json:
        console.print_json([f.model_dump(mode="json") for f in factors])
        return
    console.print_risk_factors(factors)


def init_claims_db(db_path: str | None = None) -> None:
    """Initialize claims database with sample data."""
    settings = Settings()
    path = db_path or settings.storage.claims_db
    claims_db = ClaimsDatabase(path)
    inserted = claims_db.load_sample_data()
    if inserted:
        console.print_success(f"Claims database initialized at {path} ({inserted} sample claims)")
    else:
        console.print_success(f"Claims database at {path} already has data")
    console.print_db_stats(claims_db.get_stats())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clarityclaim", description="Claim denial risk scoring and appeal drafting"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show log output")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    assess = subparsers.add_parser("assess", help="Score a claim's denial risk")
    assess.add_argument("claim_id", nargs="?", help="Stored claim id")
    assess.add_argument("--file", "-f", help="Score a claim from a JSON file instead")
    assess.add_argument("--db", help="Claims database path")
    assess.add_argument("--mock", action="store_true", help="Use mock LLM for testing")
    assess.add_argument("--json", action="store_true", help="Print the raw JSON result")

    appeal = subparsers.add_parser("appeal", help="Draft an appeal letter for a denied claim")
    appeal.add_argument("claim_id", help="Stored claim id")
    appeal.add_argument("--reason", "-r", help="Denial reason")
    appeal.add_argument("--code", "-c", help="Denial code")
    appeal.add_argument("--context", help="Additional context for the letter")
    appeal.add_argument("--db", help="Claims database path")
    appeal.add_argument("--mock", action="store_true", help="Use mock LLM for testing")
    appeal.add_argument("--json", action="store_true", help="Print the stored appeal as JSON")

    patterns = subparsers.add_parser("patterns", help="Analyze denial patterns across claims")
    patterns.add_argument("--status", help="Only include claims with this status")
    patterns.add_argument("--db", help="Claims database path")
    patterns.add_argument("--json", action="store_true", help="Print the raw JSON result")

    factors = subparsers.add_parser("factors", help="List denial risk factor definitions")
    factors.add_argument("--json", action="store_true", help="Print the raw JSON result")

    init_cmd = subparsers.add_parser(
        "init-claims", help="Initialize claims database with sample data"
    )
    init_cmd.add_argument("--db", help="Claims database path")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)
    console.verbose = args.verbose

    try:
        if args.command == "assess":
            if not args.claim_id and not args.file:
                console.print_error("Provide a claim id or --file")
                sys.exit(2)
            if args.file and not Path(args.file).exists():
                console.print_error(f"Claim file not found: {args.file}")
                sys.exit(1)
            asyncio.run(assess_claim(args.claim_id, args.file, args.db, args.mock, args.json))
        elif args.command == "appeal":
            asyncio.run(
                generate_appeal(
                    args.claim_id, args.reason, args.code, args.context, args.db, args.mock, args.json
                )
            )
        elif args.command == "patterns":
            show_patterns(args.status, args.db, args.json)
        elif args.command == "factors":
            show_factors(args.json)
        elif args.command == "init-claims":
            init_claims_db(args.db)
    except KeyboardInterrupt:
        console.console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()

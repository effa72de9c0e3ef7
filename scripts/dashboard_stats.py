#!/usr/bin/env python3
"""
Print the recruiting dashboard metrics for a backend.

Usage:
    python scripts/dashboard_stats.py
    python scripts/dashboard_stats.py --base-url https://talent.example.com/api --strict
    python scripts/dashboard_stats.py --journey 65f0c2... --json
"""
import argparse
import asyncio
import json
import sys
import os

# Add the parent directory to sys.path to import the client package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from talent_client import TalentClient
from talent_client.core.config import settings
from talent_client.core.logging import configure_logging


async def main() -> int:
    """Main function with CLI interface"""
    parser = argparse.ArgumentParser(description="Recruiting dashboard metrics")
    parser.add_argument("--base-url", default=settings.api_base_url, help="Backend base URL")
    parser.add_argument(
        "--strict", action="store_true",
        help="Exit with status 1 when any source read fails instead of printing zeros"
    )
    parser.add_argument("--journey", metavar="APPLICATION_ID", help="Also print one application's journey")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    args = parser.parse_args()

    configure_logging(app_env=settings.app_env)

    async with TalentClient(base_url=args.base_url) as client:
        if args.strict:
            result = await client.stats.collect_dashboard_stats()
            if not result.ok:
                print(f"Failed sources: {', '.join(result.failed_sources)}", file=sys.stderr)
                return 1
            stats = result.stats
        else:
            stats = await client.stats.get_dashboard_stats()

        journey = await client.lifecycle.get_journey(args.journey) if args.journey else None

    if args.json:
        output = {"stats": stats.model_dump(by_alias=True)}
        if journey is not None:
            output["journey"] = journey.model_dump(by_alias=True, exclude_none=True)
        print(json.dumps(output, indent=2, default=str))
        return 0

    print(f"Active jobs:         {stats.active_jobs}")
    print(f"Total candidates:    {stats.total_candidates}")
    print(f"Total applications:  {stats.total_applications}")
    print(f"Hot applicants:      {stats.hot_applicants}")
    print(f"Average AI score:    {stats.avg_ai_score}")

    if journey is not None:
        print()
        print(f"Journey of {journey.candidate_name or 'candidate'} ({journey.job_title or 'position'})")
        for event in journey.journey:
            print(f"  {event.timestamp}  {event.stage_name or event.stage or '':<22} {event.title or ''}")

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

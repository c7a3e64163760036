"""
LinkedIn Leads De-duplicator
Exports the rows of new lead files whose LinkedIn profile is not already in a master file.
"""
import argparse
import asyncio
import sys

from linkedin_leads import config
from linkedin_leads.logging_config import setup_logging
from linkedin_leads.pipeline import run_dedup
from linkedin_leads.reporting import StatusReporter
from linkedin_leads.utils import print_banner

logger = setup_logging()


async def run(master: str, new_files: list[str], output_dir: str) -> int:
    """Run the dedup pipeline and print a summary. Returns the process exit code."""
    print_banner("LINKEDIN LEADS DE-DUPLICATOR")
    print(f"📘 Master file: {master}")
    print(f"📄 New files: {len(new_files)}")
    print(f"💾 Output directory: {output_dir}\n")

    reporter = StatusReporter()
    result = await run_dedup(master, new_files, reporter, output_dir=output_dir)
    if result is None:
        print("\n❌ Run aborted. See the log above.")
        return 1

    stats = result.stats
    print_banner("DEDUP COMPLETE!")
    print("📊 SUMMARY:")
    print(f"   • Master IDs: {stats.master_ids}")
    for file_stats in stats.files:
        if file_stats.skipped:
            print(f"   ⚠️  {file_stats.name}: skipped (no LinkedIn URL column)")
        else:
            print(
                f"   • {file_stats.name}: {file_stats.rows} rows, "
                f"{file_stats.unique} unique, {file_stats.duplicates} duplicates"
            )
    print(f"   ✅ Unique records: {stats.unique_count}")
    print(f"   ⏭ Duplicates removed: {stats.duplicate_count}")
    if result.export_path:
        print(f"   📁 Exported to: {result.export_path}")
    return 0


def main():
    """Entry point."""
    parser = argparse.ArgumentParser(
        description="LinkedIn Leads De-duplicator - keep only profiles not already in the master file"
    )
    parser.add_argument(
        "--master",
        type=str,
        metavar="FILE",
        help="Master database file (CSV or XLSX) with previously seen profiles",
    )
    parser.add_argument(
        "--new",
        type=str,
        nargs="+",
        default=[],
        metavar="FILE",
        help="One or more search result files (CSV or XLSX) to filter",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=config.OUTPUT_DIR,
        help=f"Directory for the cleaned export (default: {config.OUTPUT_DIR})",
    )
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args.master, args.new, args.output_dir)))


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Log viewer and analyzer for health server logs."""

import argparse
import statistics
import sys
import time
from collections import Counter, deque
from pathlib import Path
from typing import Any, Dict, List

# ANSI color codes
class Colors:
    RED = '\033[91m'
    YELLOW = '\033[93m'
    GREEN = '\033[92m'
    RESET = '\033[0m'

# Constants
DEFAULT_LINES = 50
FOLLOW_SLEEP = 0.1
HEALTH_PATHS = {"/health", "/api/v1/health"}

FILE_MAP = {
    "main": "health_server.log",
    "error": "health_server_errors.log",
    "access": "health_server_access.log"
}


def tail_file(filepath: Path, lines: int = DEFAULT_LINES) -> List[str]:
    """Get last N lines from file efficiently."""
    try:
        with filepath.open('r', encoding='utf-8') as f:
            return list(deque(f, maxlen=lines))
    except FileNotFoundError:
        return [f"Log file not found: {filepath}\n"]
    except (OSError, UnicodeDecodeError) as e:
        return [f"Error reading log file {filepath}: {e}\n"]


def colorize_line(line: str) -> str:
    """Apply color formatting to log line based on level."""
    line = line.rstrip()
    if "ERROR" in line:
        return f"{Colors.RED}{line}{Colors.RESET}"
    elif "WARNING" in line:
        return f"{Colors.YELLOW}{line}{Colors.RESET}"
    elif "INFO" in line:
        return f"{Colors.GREEN}{line}{Colors.RESET}"
    return line

def follow_log(filepath: Path) -> None:
    """Follow a log file in real-time (like tail -f)."""
    try:
        with filepath.open('r', encoding='utf-8') as f:
            f.seek(0, 2)  # Go to end of file

            while True:
                line = f.readline()
                if not line:
                    time.sleep(FOLLOW_SLEEP)
                    continue
                print(colorize_line(line))

    except KeyboardInterrupt:
        print("\nLog following stopped.")
    except FileNotFoundError:
        print(f"Log file not found: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error following log file: {e}")


def parse_access_line(line: str) -> Dict[str, str]:
    """Split an access log line into its key=value fields."""
    fields = {}
    for part in line.strip().split(" | "):
        key, sep, value = part.partition("=")
        if sep:
            fields[key.strip()] = value.strip()
    return fields


def _scan_main_log(path: Path, stats: Dict[str, Any]) -> None:
    with path.open('r', encoding='utf-8') as f:
        for line in f:
            if "| ERROR |" in line:
                stats['errors'] += 1
            elif "| WARNING |" in line:
                stats['warnings'] += 1


def _scan_access_log(path: Path, stats: Dict[str, Any]) -> None:
    with path.open('r', encoding='utf-8') as f:
        for line in f:
            fields = parse_access_line(line)
            if "method" not in fields:
                continue
            stats['total_requests'] += 1
            if fields.get("path") in HEALTH_PATHS:
                stats['health_checks'] += 1
            stats['status_codes'][fields.get("status", "N/A")] += 1

            if "response_time" in fields:
                try:
                    stats['response_times'].append(float(fields["response_time"].rstrip("s")))
                except ValueError:
                    pass


def collect_stats(log_dir: Path) -> Dict[str, Any]:
    """Gather request, status and timing statistics from the log directory.

    Files that cannot be read or decoded are listed under ``read_errors``;
    counts gathered before the failure are kept.
    """
    stats = {
        'total_requests': 0,
        'health_checks': 0,
        'errors': 0,
        'warnings': 0,
        'status_codes': Counter(),
        'response_times': [],
        'read_errors': []
    }

    for name, scan in (("main", _scan_main_log), ("access", _scan_access_log)):
        path = log_dir / FILE_MAP[name]
        if not path.exists():
            continue
        try:
            scan(path, stats)
        except (OSError, UnicodeDecodeError) as e:
            stats['read_errors'].append(f"Error reading log file {path}: {e}")

    return stats


def analyze_logs(log_dir: Path) -> None:
    """Analyze logs and print a summary."""
    stats = collect_stats(log_dir)

    print("=" * 60)
    print("HEALTH SERVER LOG ANALYSIS")
    print("=" * 60)

    for problem in stats['read_errors']:
        print(f"{Colors.RED}{problem}{Colors.RESET}")
    if stats['read_errors']:
        print()

    other_requests = stats['total_requests'] - stats['health_checks']
    print(f"Total Requests:     {stats['total_requests']}")
    print(f"  - Health Checks:  {stats['health_checks']}")
    print(f"  - Other:          {other_requests}")
    print()

    if stats['status_codes']:
        print("Status Codes:")
        for code, count in sorted(stats['status_codes'].items()):
            print(f"  - {code}:            {count}")
        print()

    print(f"Errors:             {stats['errors']}")
    print(f"Warnings:           {stats['warnings']}")
    print()

    if stats['response_times']:
        avg_time = statistics.mean(stats['response_times'])
        median_time = statistics.median(stats['response_times'])
        print(f"Average Response:   {avg_time:.3f} seconds")
        print(f"Median Response:    {median_time:.3f} seconds")
        print(f"Fastest Response:   {min(stats['response_times']):.3f} seconds")
        print(f"Slowest Response:   {max(stats['response_times']):.3f} seconds")

    print("=" * 60)


def main() -> None:
    """Main entry point for log viewer."""
    parser = argparse.ArgumentParser(description="Health Server Log Viewer and Analyzer")
    parser.add_argument("--log-dir", type=Path, default=Path("logs"),
                       help="Directory containing log files")
    parser.add_argument("--lines", "-n", type=int, default=DEFAULT_LINES,
                       help="Number of lines to show")
    parser.add_argument("--follow", "-f", action="store_true",
                       help="Follow log in real-time")
    parser.add_argument("--analyze", "-a", action="store_true",
                       help="Analyze logs and show statistics")
    parser.add_argument("--file", choices=sorted(FILE_MAP), default="main",
                       help="Which log file to view")

    args = parser.parse_args()

    if not args.log_dir.exists():
        print(f"Log directory not found: {args.log_dir}")
        print("Make sure the server has been started at least once.")
        sys.exit(1)

    if args.analyze:
        analyze_logs(args.log_dir)
        return

    log_file = args.log_dir / FILE_MAP[args.file]

    if args.follow:
        print(f"Following {log_file} (Press Ctrl+C to stop)")
        print("-" * 60)
        follow_log(log_file)
    else:
        print(f"Last {args.lines} lines from {log_file}:")
        print("-" * 60)
        for line in tail_file(log_file, args.lines):
            print(colorize_line(line))


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Compression Experiment Runner
=============================

Processes the job queue from experiments/config.py, compressing each
family to its colex initial segment and saving the run as JSON.

Usage:
    python experiments/run_experiments.py              # run pending jobs
    python experiments/run_experiments.py --reset      # clear state and restart
    python experiments/run_experiments.py --parallel   # process-pool scans

Ctrl+C to stop cleanly between jobs.

Author: Carmen Esteban
"""

import os
import sys
import json
import time
import signal
import argparse
from dataclasses import replace

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from experiments.config import DEFAULT_CONFIG, JOB_QUEUE
from kruskal_katona.core import KruskalKatonaError
from kruskal_katona.families import (
    colex_final_segment, lex_initial_segment, random_family, star_family,
)
from kruskal_katona.initial_segment import initial_segment
from kruskal_katona.report import compression_report


# --- Paths ---

STATE_FILE = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "state.json")
RESULTS_DIR = os.path.join(PROJECT_ROOT, "results")


# --- State management ---

def load_state():
    if os.path.exists(STATE_FILE):
        with open(STATE_FILE) as f:
            return json.load(f)
    return {"completed": [], "current": None, "started_at": None}


def save_state(state):
    with open(STATE_FILE, "w") as f:
        json.dump(state, f, indent=2)


# --- Job builders ---

def build_job(builder, n, r, k):
    """Build the input family for one queue entry."""
    if builder == "initial":
        return initial_segment(r, k, n)
    elif builder == "final":
        return colex_final_segment(n, r, k)
    elif builder == "lex":
        return lex_initial_segment(n, r, k)
    elif builder == "star":
        return star_family(n, r, k=k)
    elif builder == "random":
        return random_family(n, r, k)
    else:
        raise ValueError(f"Unknown builder: {builder}")


# --- Main runner ---

class ExperimentRunner:
    """Process compression jobs from the queue, one at a time."""

    def __init__(self, config=None):
        self.config = config or DEFAULT_CONFIG
        self.state = load_state()
        self.stop_requested = False

        signal.signal(signal.SIGINT, self._handle_signal)
        signal.signal(signal.SIGTERM, self._handle_signal)

    def _handle_signal(self, signum, frame):
        print("\n>>> Stop requested. Finishing current job...")
        self.stop_requested = True

    def run(self):
        """Process all pending jobs."""
        os.makedirs(RESULTS_DIR, exist_ok=True)

        completed = set(self.state.get("completed", []))
        pending = [job for job in JOB_QUEUE if job[0] not in completed]

        if not pending:
            print("All jobs completed!")
            return

        print("=== Kruskal-Katona Compression Runner ===")
        print(f"Jobs: {len(pending)} pending, {len(completed)} completed")
        print(f"Results dir: {RESULTS_DIR}")
        print()

        for job_name, builder, n, r, k in pending:
            if self.stop_requested:
                print("Stopped by user.")
                break

            print(f"--- Job: {job_name} ---")
            self.state["current"] = job_name
            self.state["started_at"] = time.strftime("%Y-%m-%d %H:%M:%S")
            save_state(self.state)

            try:
                family = build_job(builder, n, r, k)
                report = compression_report(family, self.config)
                print(f"  Shadow {report['shadow_before']} -> "
                      f"{report['shadow_after']} (bound {report['kk_bound']}, "
                      f"{report['num_steps']} steps)")

                safe_name = job_name.replace("(", "_").replace(")", "").replace(",", "_")
                result_path = os.path.join(RESULTS_DIR, f"{safe_name}.json")
                report["result"].save(result_path)
                print(f"  Saved: {result_path}")

                self.state["completed"].append(job_name)
                self.state["current"] = None
                save_state(self.state)

            except KruskalKatonaError as e:
                print(f"  ERROR: {type(e).__name__}: {e}")
                self.state["current"] = None
                save_state(self.state)

        print("\n=== Done ===")
        completed = self.state.get("completed", [])
        print(f"Completed: {len(completed)}/{len(JOB_QUEUE)}")


# --- Entry point ---

def main():
    parser = argparse.ArgumentParser(description="Kruskal-Katona Compression Runner")
    parser.add_argument("--reset", action="store_true",
                        help="Reset state and start from scratch")
    parser.add_argument("--parallel", action="store_true",
                        help="Scan candidate pairs in a process pool")
    parser.add_argument("--quiet", action="store_true",
                        help="Only print per-job summaries")
    args = parser.parse_args()

    if args.reset:
        if os.path.exists(STATE_FILE):
            os.remove(STATE_FILE)
        print("State reset.")

    config = replace(DEFAULT_CONFIG, parallel=args.parallel,
                     verbose=not args.quiet)
    runner = ExperimentRunner(config)
    runner.run()


if __name__ == "__main__":
    main()

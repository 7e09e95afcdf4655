#!/usr/bin/env python3
"""
Demonstration of the Mission Engine.

This demo plays the role of the host game layer:
- Loading mission definitions from JSON
- Subscribing to state changes (rewards are issued by the host)
- Pushing objective progress until a mission completes on its own
- Failing and resetting a mission for a retry
- Handling an invalid objective index
"""

import sys
import os
import argparse
import logging

# Add the current directory to Python path
sys.path.insert(0, os.path.dirname(__file__))

from mission_engine import Mission, MissionState, MissionStateChanged, ObjectiveIndexError, load_missions
from mission_engine.log import setup_logger

MISSIONS_FILE = os.path.join(os.path.dirname(__file__), "assets", "missions.json")

logger = logging.getLogger("mission_engine.demo")

class DemoHost:
    """Minimal host: keeps the player's wallet and reacts to transitions."""

    def __init__(self):
        self.experience = 0
        self.currency = 0

    def on_state_changed(self, event: MissionStateChanged, mission: Mission) -> None:
        print(f"  [event] {mission.title}: {event.old_state.value} -> {event.new_state.value}")
        if event.new_state is MissionState.COMPLETED:
            self.experience += mission.experience_reward
            self.currency += mission.currency_reward
            print(f"  [reward] +{mission.experience_reward} XP, +{mission.currency_reward} coins")

def print_progress(mission: Mission) -> None:
    print(f"  {mission.title} [{mission.state.value}] "
          f"{mission.completed_objective_count()}/{mission.total_objective_count()} objectives")
    for objective in mission.objectives:
        marker = "x" if objective.completed else " "
        print(f"    [{marker}] {objective.description} ({objective.progress}/{objective.target})")

def demo_completion(host: DemoHost, mission: Mission):
    """Drive a mission to completion through progress updates."""
    print("=== DEMO: Completion ===")
    mission.subscribe(host.on_state_changed)
    mission.start()

    for kills in range(1, 4):
        mission.update_objective_progress(0, kills)
    print_progress(mission)

    # Last objective: the mission completes as part of this update
    mission.update_objective_progress(1, 1)
    print_progress(mission)
    print()

def demo_failure_and_retry(host: DemoHost, mission: Mission):
    """Fail a mission, show that it is sticky, then reset and retry."""
    print("=== DEMO: Failure & Retry ===")
    mission.subscribe(host.on_state_changed)
    mission.start()
    mission.fail()

    # Terminal: these are no-ops
    mission.start()
    mission.complete()
    print_progress(mission)

    mission.reset()
    mission.start()
    mission.update_objective_progress(0, 10)  # clamped to target
    print_progress(mission)
    print()

def demo_invalid_index(mission: Mission):
    print("=== DEMO: Invalid objective index ===")
    try:
        mission.update_objective_progress(99, 5)
    except ObjectiveIndexError as e:
        print(f"  Ignored: {e}")
    print()

def main(argv=None):
    parser = argparse.ArgumentParser(description="Mission engine demo")
    parser.add_argument("--missions", default=MISSIONS_FILE, help="Path to the missions JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show engine debug logs")
    args = parser.parse_args(argv)

    setup_logger(verbose=args.verbose)

    missions = {m.id: m for m in load_missions(args.missions)}
    host = DemoHost()

    demo_completion(host, missions["clear_the_pantry"])
    demo_failure_and_retry(host, missions["escort_the_courier"])
    demo_invalid_index(missions["clear_the_pantry"])

    logger.info("Demo finished")
    print(f"Totals: {host.experience} XP, {host.currency} coins")
    return 0

if __name__ == "__main__":
    sys.exit(main())

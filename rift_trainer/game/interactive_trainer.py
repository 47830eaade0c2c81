"""Interactive trainers for the terminal.

Guess champion classes, or recall abilities and rate yourself.
"""

import os
import sys
from typing import Optional

from rift_trainer.api.config import settings
from rift_trainer.api.dependencies import get_catalog, get_history_store
from rift_trainer.core.constants import CLASS_GROUPS, RATING_LABELS
from rift_trainer.core.history_store import HistoryStore, Rating
from rift_trainer.core.mastery import compute_mastery
from rift_trainer.core.queue_builder import QueueOrder
from rift_trainer.core.session import EmptyQueueError, InvalidGuessError, SessionStatus
from rift_trainer.core.class_session import ClassTrainerSession
from rift_trainer.core.skills_session import SkillsTrainerSession
from rift_trainer.data.catalog import Catalog
from rift_trainer.data.models import ChampionClass
from rift_trainer.logging_config import setup_logging


def clear_screen():
    """Clear the terminal screen."""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header(text: str, char: str = "="):
    """Print a formatted header."""
    print(f"\n{char * 60}")
    print(f"  {text}")
    print(f"{char * 60}")


def print_divider(char: str = "-"):
    """Print a divider line."""
    print(char * 60)


# Numbered menu of every class, in taxonomy order
CLASS_MENU: list[ChampionClass] = [cls for group in CLASS_GROUPS for cls in group.subclasses]


def print_no_data():
    print("\n  No champion data available.")
    print("  Check the catalog snapshot, or point RIFT_DATA_DIR at one.")


class InteractiveClassTrainer:
    """Class trainer with CLI interface."""

    def __init__(self, catalog: Catalog):
        self.session = ClassTrainerSession(catalog)
        self.running = True

    def run(self):
        """Run the guessing loop until the player quits."""
        clear_screen()
        print_header("CLASS TRAINER")
        if not self.session.has_data:
            print_no_data()
            return

        print("\n  Pick the class(es) of each champion. Up to two per guess.")
        print("\n  Commands:")
        print("    [1-13]  - Select / unselect a class")
        print("    [x N]   - Rule out class N for this champion")
        print("    [g]     - Submit guess")
        print("    [h]     - Show recent guesses")
        print("    [q]     - Finish")
        print_divider()
        input("\nPress Enter to start...")

        try:
            self.session.start()
        except EmptyQueueError as e:
            print(f"\n  {e}")
            return

        while self.running and self.session.status == SessionStatus.IN_PROGRESS:
            self.show_champion()
            self.handle_command(input("\nCommand: ").strip().lower())

        self.show_summary()

    def show_champion(self):
        session = self.session
        champion = session.current_champion
        print_header(
            f"{champion.name}   (score {session.score}/{session.total_attempted},"
            f" round {session.rounds_completed + 1})",
            "-",
        )
        hints = session.hints()
        for i, cls in enumerate(CLASS_MENU, start=1):
            marker = " "
            if cls in session.selected:
                marker = "*"
            elif cls in session.discarded:
                marker = "x"
            hint = ""
            if cls in hints:
                hint = "  (hit)" if hints[cls] else "  (miss)"
            print(f"  [{i:2}] {marker} {cls.value}{hint}")

    def handle_command(self, cmd: str):
        session = self.session
        if cmd == "q":
            session.finish()
            self.running = False
        elif cmd == "g":
            self.submit()
        elif cmd == "h":
            self.show_recent()
        elif cmd.startswith("x"):
            cls = self.parse_class(cmd[1:].strip())
            if cls is not None:
                session.toggle_discard(cls)
        else:
            cls = self.parse_class(cmd)
            if cls is None:
                return
            was_selected = cls in session.selected
            if not session.toggle_selection(cls) and not was_selected:
                if cls in session.discarded:
                    print(f"  {cls.value} is ruled out.")
                else:
                    print("  Already two classes selected.")

    @staticmethod
    def parse_class(value: str) -> Optional[ChampionClass]:
        if value.isdigit() and 1 <= int(value) <= len(CLASS_MENU):
            return CLASS_MENU[int(value) - 1]
        cls = ChampionClass.parse(value.capitalize())
        if cls is None:
            print(f"  Unknown command or class: {value!r}")
        return cls

    def submit(self):
        champion = self.session.current_champion
        try:
            result = self.session.submit_guess()
        except InvalidGuessError as e:
            print(f"  {e}")
            return

        parts = [f"{r.cls.value} {'hit' if r.hit else 'miss'}" for r in result.results]
        print(f"\n  {', '.join(parts)}")
        if result.exact_match:
            print(f"  Correct! {champion.name}: {', '.join(c.value for c in champion.classes)}")
        else:
            if result.missed:
                print(f"  {len(result.missed)} class(es) still missing.")
            print("  Try again.")
        input("\nPress Enter to continue...")

    def show_recent(self):
        print_header("RECENT GUESSES", "-")
        for entry in self.session.recent_history(settings.HISTORY_DISPLAY_LIMIT):
            guess = ", ".join(r.cls.value for r in entry.guess_results)
            status = "correct" if entry.exact_match else "wrong"
            print(f"  {entry.champion.name:<15} {guess:<30} {status}")
        input("\nPress Enter to continue...")

    def show_summary(self):
        session = self.session
        print_header("SESSION OVER")
        print(f"\n  Score: {session.score}/{session.total_attempted}")
        if session.accuracy is not None:
            print(f"  First-try accuracy: {session.accuracy:.0%}")
        if session.missed:
            print("\n  Champions to review:")
            for missed in session.missed:
                classes = ", ".join(c.value for c in missed.actual_classes)
                print(f"    {missed.champion.name:<15} {classes}")


class InteractiveSkillsTrainer:
    """Skills trainer with CLI interface."""

    RATING_KEYS = {"1": Rating.NAILED, "2": Rating.PARTIAL, "3": Rating.NO_IDEA}

    def __init__(self, catalog: Catalog, history_store: HistoryStore, order: QueueOrder):
        self.catalog = catalog
        self.history_store = history_store
        self.session = SkillsTrainerSession(catalog, history_store=history_store, order=order)

    def run(self):
        """Run through the ability queue once."""
        clear_screen()
        print_header("SKILLS TRAINER")
        if not self.session.has_data:
            print_no_data()
            return

        history_mastery = compute_mastery(self.history_store.load())
        if history_mastery is not None:
            print(f"\n  Overall mastery so far: {history_mastery}%")
        print(f"  Order: {self.session.order.value}")
        print("\n  Recall what each ability does, reveal it, then rate yourself.")
        print("  Enter [q] at any prompt to finish early.")
        print_divider()
        input("\nPress Enter to start...")

        try:
            self.session.start()
        except EmptyQueueError as e:
            print(f"\n  {e}")
            return

        while self.session.status == SessionStatus.IN_PROGRESS:
            if not self.review_current():
                self.session.finish()

        self.show_summary()

    def review_current(self) -> bool:
        """Show, reveal and rate one ability. Returns False to stop."""
        session = self.session
        item = session.current_item
        print_header(
            f"{item.champion.name} - {item.slot.value}   ({session.remaining} left)",
            "-",
        )
        print(f"  Icon: {item.ability.image_url}")
        if input("\nPress Enter to reveal...").strip().lower() == "q":
            return False

        ability = session.reveal().ability
        print(f"\n  {ability.name}")
        if ability.cooldown:
            print(f"  Cooldown: {ability.cooldown}")
        if ability.cost:
            print(f"  Cost: {ability.cost} {ability.resource or ''}".rstrip())
        for effect in ability.effects:
            print(f"\n  {effect.description}")

        print()
        for key, rating in self.RATING_KEYS.items():
            print(f"    [{key}] {RATING_LABELS[rating.value]}")
        while True:
            choice = input("\nRating (1-3): ").strip().lower()
            if choice == "q":
                return False
            if choice in self.RATING_KEYS:
                session.submit_rating(self.RATING_KEYS[choice])
                return True
            print("Enter 1, 2, or 3")

    def show_summary(self):
        summary = self.session.summary()
        print_header("SESSION OVER")
        print(f"\n  Reviewed: {summary.reviewed}")
        print(f"  {RATING_LABELS['nailed']}: {summary.nailed}")
        print(f"  {RATING_LABELS['partial']}: {summary.partial}")
        print(f"  {RATING_LABELS['no_idea']}: {summary.no_idea}")
        if summary.mastery is not None:
            print(f"  Session mastery: {summary.mastery}%")


def main():
    """Main entry point."""
    setup_logging("WARNING", settings.LOG_FILE)
    catalog = get_catalog()

    mode = sys.argv[1] if len(sys.argv) > 1 else "class"
    if mode == "class":
        InteractiveClassTrainer(catalog).run()
        return
    if mode != "skills":
        print(f"Unknown mode {mode!r}. Use 'class' or 'skills'.")
        sys.exit(2)

    print("\n=== Skills Trainer ===\n")
    print("Select order:")
    print("  [1] Grouped by champion")
    print("  [2] Interleaved")
    while True:
        choice = input("\nOrder (1-2): ").strip()
        if choice == '1':
            order = QueueOrder.GROUPED
            break
        elif choice == '2':
            order = QueueOrder.INTERLEAVED
            break
        else:
            print("Enter 1 or 2")

    InteractiveSkillsTrainer(catalog, get_history_store(), order).run()


if __name__ == "__main__":
    main()

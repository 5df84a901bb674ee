"""Demo script for eisenhower-board."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from eisenhower_board.adapters.text_adapter import parse
from eisenhower_board.session import BoardSession


def main() -> None:
    session = BoardSession()
    created = session.submit(parse("examples/sample_tasks.txt"))
    print("Created:", [task.content for task in created])
    session.drop(1, "Important & Urgent")
    session.drop(2, "Important & Not Urgent")
    session.drop(3, "Unimportant & Urgent")
    print(session.summary)


if __name__ == "__main__":
    main()

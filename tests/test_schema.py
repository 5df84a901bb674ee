import pytest

from eisenhower_board.schema import BUCKET_LABELS, DEFAULT_BUCKET, Task, quadrant_for, resolve_label


def test_bucket_labels_are_fixed():
    assert BUCKET_LABELS == (
        "Important & Urgent",
        "Important & Not Urgent",
        "Unimportant & Urgent",
        "Unimportant & Not Urgent",
    )
    assert DEFAULT_BUCKET == BUCKET_LABELS[-1]


@pytest.mark.parametrize(
    "name,label",
    [
        ("do", "Important & Urgent"),
        ("DECIDE", "Important & Not Urgent"),
        ("q3", "Unimportant & Urgent"),
        (" unimportant & not urgent ", "Unimportant & Not Urgent"),
    ],
)
def test_resolve_label_aliases(name, label):
    assert resolve_label(name) == label


def test_resolve_label_unknown():
    with pytest.raises(ValueError):
        resolve_label("later")


def test_quadrant_metadata():
    assert quadrant_for("Unimportant & Urgent").action == "DELEGATE"


def test_task_is_immutable():
    task = Task(1, "a")
    with pytest.raises(AttributeError):
        task.content = "b"

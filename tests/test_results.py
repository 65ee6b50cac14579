import pytest

from srcscan.priority import Priority
from srcscan.results import (
    DirectoryResults,
    FileResults,
    Violation,
    find_results_for_path,
    number_of_files_with_violations,
    number_of_violations_with_priority,
    summarize,
    total_number_of_files,
    violations,
)
from srcscan.source import SourceCode
from srcscan.tree import build_results_tree


def populate(root, violations_by_path):
    for path, found in violations_by_path.items():
        node = find_results_for_path(root, path)
        node._attach(SourceCode(path=path, text=""), found)
    return root


@pytest.fixture
def tree():
    root = build_results_tree(["One.groovy", "dir/Two.groovy", "dir/sub/Three.groovy", "Four.groovy"])
    return populate(
        root,
        {
            "One.groovy": [Violation("r1", 1, "high"), Violation("r3", 3, "low")],
            "dir/Two.groovy": [Violation("r2", 2, "medium")],
            "dir/sub/Three.groovy": [Violation("r3", 3, "low"), Violation("r3", 3, "low again")],
            "Four.groovy": [],
        },
    )


def test_total_number_of_files(tree):
    assert total_number_of_files(tree) == 4
    assert tree.total_number_of_files == 4
    assert find_results_for_path(tree, "dir").total_number_of_files == 2
    assert find_results_for_path(tree, "One.groovy").total_number_of_files == 1


@pytest.mark.parametrize(
    "max_priority, expected",
    [(1, 1), (2, 2), (3, 3), (Priority.LOW, 3)],
)
def test_files_with_violations_threshold_is_inclusive(tree, max_priority, expected):
    assert number_of_files_with_violations(tree, max_priority) == expected


def test_files_with_violations_never_exceeds_total(tree):
    for threshold in (1, 2, 3):
        assert tree.number_of_files_with_violations(threshold) <= tree.total_number_of_files


def test_queries_do_not_mutate(tree):
    before = tree.to_dict()

    tree.number_of_files_with_violations(3)
    summarize(tree)
    violations(tree)

    assert tree.to_dict() == before


def test_violations_collects_whole_subtree(tree):
    assert len(violations(tree)) == 5
    assert [v.message for v in find_results_for_path(tree, "dir").violations] == ["medium", "low", "low again"]


def test_number_of_violations_with_priority(tree):
    assert number_of_violations_with_priority(tree, 1) == 1
    assert number_of_violations_with_priority(tree, 2) == 1
    assert number_of_violations_with_priority(tree, 3) == 3


def test_find_results_for_path_missing(tree):
    assert find_results_for_path(tree, "nope") is None


def test_summarize(tree):
    summary = summarize(tree)

    assert summary.to_dict() == {
        "p1": 1,
        "p2": 1,
        "p3": 3,
        "other": 0,
        "files": 4,
        "files_with_violations": 3,
        "worst_priority": 1,
        "total": 5,
    }
    assert summary.as_rows() == [("HIGH", 1), ("MEDIUM", 1), ("LOW", 3)]
    assert summary.worst_priority == Priority.HIGH


def test_file_results_equality_ignores_violation_order():
    first = FileResults("a.groovy")
    second = FileResults("a.groovy")
    first._attach(SourceCode("a.groovy", ""), [Violation("r", 1, "x"), Violation("r", 2, "y")])
    second._attach(SourceCode("a.groovy", ""), [Violation("r", 2, "y"), Violation("r", 1, "x")])

    assert first == second


def test_directory_rejects_duplicate_child():
    directory = DirectoryResults("dir")
    directory.add_child("a", FileResults("dir/a"))

    with pytest.raises(KeyError):
        directory.add_child("a", FileResults("dir/a"))


def test_to_dict_shape(tree):
    data = tree.to_dict()

    assert data["type"] == "directory"
    base = data["children"][0]
    assert [child["path"] for child in base["children"]] == ["Four.groovy", "One.groovy", "dir"]
    one = base["children"][1]
    assert one["violations"][0] == {
        "rule_name": "r1",
        "priority": 1,
        "message": "high",
        "line_number": None,
        "source_line": None,
    }


def test_summary_counts_priorities_outside_the_scale():
    root = build_results_tree(["Odd.groovy"])
    populate(root, {"Odd.groovy": [Violation("r4", 4, "minor"), Violation("r0", 0, "blocker")]})

    summary = summarize(root, 4)

    assert summary.other == 2
    assert summary.total == 2
    assert summary.files_with_violations == 1
    assert summary.worst_priority == 0
    assert summary.as_rows()[-1] == ("OTHER", 2)


def test_file_results_have_no_public_mutator():
    assert not hasattr(FileResults, "attach")

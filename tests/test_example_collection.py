"""
Test the example collection and the demo driver built on it.
"""

import demo_traversal
from strcursor.examples import build_example_collection


def test_example_collection_contents():
    collection = build_example_collection()
    assert collection.values == ("hourglass", "cat", "manifestation", "city")


def test_demo_output(capsys):
    demo_traversal.main(["demo_traversal.py"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Sequential traversal:",
        "hourglass",
        "cat",
        "manifestation",
        "city",
        "Filtered traversal (length > 5):",
        "hourglass",
        "manifestation",
    ]


def test_demo_with_config(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text(
        "values: [apple, kiwi, avocado]\nfilter:\n  type: length_gt\n  length: 4\n",
        encoding="utf-8",
    )
    demo_traversal.main(["demo_traversal.py", str(path)])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Sequential traversal:",
        "apple",
        "kiwi",
        "avocado",
        "Filtered traversal (length > 4):",
        "apple",
        "avocado",
    ]

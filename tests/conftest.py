import pytest
import yaml


@pytest.fixture
def range_list():
    """Provide an empty RangeList.

    Returns:
        A fresh RangeList with no breakpoints.
    """
    from rangelist.range_list import RangeList

    return RangeList()


@pytest.fixture
def populated_map():
    """Provide an OrderedMap holding keys 10..50 with values ``key * 10``.

    Returns:
        OrderedMap with keys 10, 20, 25, 30, 35, 40, 50.
    """
    from rangelist.ordered_map import OrderedMap

    tree = OrderedMap()
    for key in [10, 20, 30, 40, 50, 25, 35]:
        tree.insert(key, key * 10)
    return tree


@pytest.fixture
def scenario_data():
    """Provide raw scenario file data with one passing and one plain scenario.

    Returns:
        Dict shaped like a scenario YAML document.
    """
    return {
        "scenarios": [
            {
                "name": "overlap",
                "operations": [
                    {"op": "add", "from": 10, "to": 30, "amount": 1},
                    {"op": "add", "from": 20, "to": 40, "amount": 1},
                ],
                "expected": [[10, 1], [20, 2], [30, 1], [40, 0]],
            },
            {
                "name": "no-expectation",
                "operations": [{"op": "set", "from": 0, "to": 5, "amount": 2}],
            },
        ]
    }


@pytest.fixture
def scenario_path(tmp_path, scenario_data):
    """Write ``scenario_data`` to a temporary YAML file.

    Args:
        tmp_path: Pytest tmp_path fixture.
        scenario_data: Scenario document fixture.

    Returns:
        Path to the temporary scenario file.
    """
    path = tmp_path / "scenarios.yaml"
    path.write_text(yaml.dump(scenario_data))
    return path

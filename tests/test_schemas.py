from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from cargo_packer.containers import get_container, get_container_dims
from cargo_packer.io.schemas import PackRequest, dump_placements, load_placements, load_request
from cargo_packer.models import BoxSpec, Container
from cargo_packer.packing.first_fit import pack_boxes


def test_short_keys_are_accepted():
    spec = BoxSpec.model_validate({"l": 60, "w": 40, "h": 30, "count": 5})
    assert spec.dimensions == (60.0, 40.0, 30.0)
    assert spec.count == 5


def test_count_defaults_to_one():
    assert BoxSpec(length=1, width=1, height=1).count == 1


@pytest.mark.parametrize(
    "data",
    [
        {"length": 0, "width": 1, "height": 1},
        {"length": 1, "width": -2, "height": 1},
        {"length": 1, "width": 1, "height": 1, "count": -1},
        {"length": 1, "width": 1, "height": 1, "count": 1.5},
        {"width": 1, "height": 1},
    ],
)
def test_invalid_box_specs(data):
    with pytest.raises(ValidationError):
        BoxSpec.model_validate(data)


def test_invalid_container():
    with pytest.raises(ValidationError):
        Container(length=10, width=0, height=10)


def test_bare_list_request(tmp_path):
    path = tmp_path / "boxes.json"
    path.write_text(json.dumps([{"l": 5, "w": 5, "h": 5, "count": 2}]))

    request = load_request(path)

    assert request.container is None
    assert len(request.boxes) == 1
    assert request.resolve_container() == get_container("DEFAULT")


def test_request_with_preset():
    request = PackRequest.model_validate({"container_preset": "40hc", "boxes": []})
    container = request.resolve_container()
    assert (container.length, container.width, container.height) == (1203, 235, 269)


def test_request_rejects_unknown_preset():
    with pytest.raises(ValidationError):
        PackRequest.model_validate({"container_preset": "99XL", "boxes": []})


def test_request_rejects_container_and_preset():
    with pytest.raises(ValidationError):
        PackRequest.model_validate({
            "container": {"length": 10, "width": 10, "height": 10},
            "container_preset": "20",
            "boxes": [],
        })


def test_unknown_preset_lists_valid_names():
    with pytest.raises(ValueError, match="40HC"):
        get_container_dims("nope")


def test_export_and_reimport_keeps_layout(tmp_path):
    container = Container(length=20, width=10, height=10)
    result = pack_boxes(container, [BoxSpec(length=10, width=10, height=10), BoxSpec(length=5, width=5, height=5, count=8)])

    path = dump_placements(result, tmp_path / "out" / "placed.json")
    data = json.loads(path.read_text())

    assert data[0] == {"x": 0.0, "y": 0.0, "z": 0.0, "length": 10.0, "width": 10.0, "height": 10.0}
    assert load_placements(path) == result.placements


def test_load_placements_accepts_short_keys(tmp_path):
    path = tmp_path / "placed.json"
    path.write_text(json.dumps([{"x": 0, "y": 0, "z": 0, "l": 2, "h": 3, "w": 4}]))

    (p,) = load_placements(path)
    assert (p.length, p.width, p.height) == (2, 4, 3)

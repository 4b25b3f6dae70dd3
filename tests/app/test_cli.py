from __future__ import annotations

import uuid

import pytest

from locationbook.domain.errors import CannotRemoveOnlineRecord, LoadingFailed
from locationbook.domain.model import LocationPreview
from locationbook.ui import cli
from tests.helpers.locations import make_custom, make_remote


def test_list_prints_one_line_per_location(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    captured: dict[str, object] = {}

    def fake_list(**kwargs: object) -> list[object]:
        captured.update(kwargs)
        return [make_custom("Home"), make_remote("Museum")]

    monkeypatch.setattr(cli, "list_locations", fake_list)

    cli.main(["list", "--offline"])

    assert captured["offline"] is True
    lines = capsys.readouterr().out.splitlines()
    assert [line.split("\t")[0] for line in lines] == ["Home", "Museum"]
    assert lines[1].endswith("remote")


def test_add_passes_coordinates_and_prints_id(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    created = make_custom("Home", latitude=52.0, longitude=4.3)
    captured: list[tuple[str, float, float]] = []

    def fake_add(name: str, latitude: float, longitude: float) -> object:
        captured.append((name, latitude, longitude))
        return created

    monkeypatch.setattr(cli, "add_location", fake_add)

    cli.main(["add", "Home", "52.0", "4.3"])

    assert captured == [("Home", 52.0, 4.3)]
    assert capsys.readouterr().out.strip() == str(created.id)


def test_update_forwards_only_given_fields(monkeypatch: pytest.MonkeyPatch) -> None:
    location = make_custom("Home")
    captured: dict[str, object] = {}

    def fake_update(location_id: uuid.UUID, **kwargs: object) -> object:
        captured["id"] = location_id
        captured.update(kwargs)
        return location.with_changes(name="Cottage")

    monkeypatch.setattr(cli, "update_location", fake_update)

    cli.main(["update", str(location.id), "--name", "Cottage"])

    assert captured == {"id": location.id, "name": "Cottage", "latitude": None, "longitude": None}


def test_suggest_prints_previews(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(
        cli, "suggest_locations", lambda _query: [LocationPreview("Amsterdam", 52.37, 4.89)]
    )

    cli.main(["suggest", "amst"])

    assert capsys.readouterr().out.strip() == "Amsterdam\t52.37\t4.89"


def test_invalid_uuid_exits_with_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "remove_location", lambda _id: None)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["remove", "not-a-uuid"])

    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    "error", [CannotRemoveOnlineRecord(), LoadingFailed("disk unavailable")]
)
def test_domain_errors_exit_with_failure(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    error: Exception,
) -> None:
    def fake_remove(_location_id: uuid.UUID) -> None:
        raise error

    monkeypatch.setattr(cli, "remove_location", fake_remove)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["remove", str(uuid.uuid4())])

    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_missing_command_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2

import threading

import pytest

from bandtracks.domain.favorites.registry import INCOMPLETE_DATA_MESSAGE, INVALID_TYPES_MESSAGE
from bandtracks.errors import InvalidRequest


@pytest.mark.unit
def test_toggle_adds_then_removes(registry):
    added = registry.toggle_favorite("Queen", 1, "u1", 5)
    assert added.action == "added"
    assert registry.list_favorites() == [added.entry]

    removed = registry.toggle_favorite("Queen", 1, "someone-else", 1)
    assert removed.action == "removed"
    assert removed.entry.user == "u1"
    assert removed.entry.ranking == 5
    assert registry.list_favorites() == []


@pytest.mark.unit
def test_band_name_match_is_case_insensitive(registry):
    registry.toggle_favorite("Queen", 1, "u1", 5)
    result = registry.toggle_favorite("queen", 1, "u1", 5)
    assert result.action == "removed"
    assert len(registry) == 0


@pytest.mark.unit
def test_track_id_must_match_exactly(registry):
    registry.toggle_favorite("Queen", 1, "u1", 5)
    result = registry.toggle_favorite("Queen", 2, "u1", 5)
    assert result.action == "added"
    assert len(registry) == 2


@pytest.mark.unit
@pytest.mark.parametrize(
    "band,track_id,user,ranking",
    [
        (None, 1, "u1", 5),
        ("", 1, "u1", 5),
        ("Queen", None, "u1", 5),
        ("Queen", 0, "u1", 5),
        ("Queen", 1, "", 5),
        ("Queen", 1, "u1", None),
        ("Queen", 1, "u1", 0),
    ],
)
def test_incomplete_data_is_rejected(registry, band, track_id, user, ranking):
    with pytest.raises(InvalidRequest) as excinfo:
        registry.toggle_favorite(band, track_id, user, ranking)
    assert excinfo.value.message == INCOMPLETE_DATA_MESSAGE
    assert len(registry) == 0


@pytest.mark.unit
@pytest.mark.parametrize("band,track_id", [(["Queen"], 1), ("Queen", "1"), ("Queen", True), ("Queen", 1.5)])
def test_wrongly_typed_identity_is_rejected(registry, band, track_id):
    with pytest.raises(InvalidRequest) as excinfo:
        registry.toggle_favorite(band, track_id, "u1", 5)
    assert excinfo.value.message == INVALID_TYPES_MESSAGE
    assert len(registry) == 0


@pytest.mark.unit
def test_list_keeps_insertion_order_after_removal(registry):
    registry.toggle_favorite("Queen", 1, "u1", 5)
    registry.toggle_favorite("Muse", 2, "u1", 4)
    registry.toggle_favorite("Blur", 3, "u2", 3)
    registry.toggle_favorite("muse", 2, "u1", 4)

    assert [(f.band_name, f.track_id) for f in registry.list_favorites()] == [("Queen", 1), ("Blur", 3)]


@pytest.mark.unit
def test_values_are_stored_verbatim(registry):
    result = registry.toggle_favorite("Queen", 1, {"id": 9}, "top")
    assert result.entry.user == {"id": 9}
    assert result.entry.ranking == "top"
    assert result.entry.band_name == "Queen"


@pytest.mark.unit
def test_concurrent_toggles_on_same_identity_never_duplicate(registry):
    # An even number of toggles on one identity must leave it absent
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        for _ in range(50):
            registry.toggle_favorite("Queen", 1, "u1", 5)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert registry.list_favorites() == []

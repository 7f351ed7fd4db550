import json
import os
import time
from concurrent.futures import ThreadPoolExecutor

from travelai.models.destination import Destination, TravelPreferences
from travelai.services.store_service import TravelStore


def test_compare_list_has_no_duplicate_keys(store):
    kyoto = Destination(name="Kyoto", country="Japan")
    store.add_to_compare(kyoto)
    store.add_to_compare(Destination(name="Kyoto", country="Japan", match=50))
    store.add_to_compare(Destination(name="Kyoto", country="USA"))

    assert [d.key() for d in store.state.compareList] == [("Kyoto", "Japan"), ("Kyoto", "USA")]


def test_remove_from_compare(store):
    store.add_to_compare(Destination(name="Kyoto", country="Japan"))
    store.add_to_compare(Destination(name="Goa", country="India"))
    store.remove_from_compare("Kyoto", "Japan")
    assert [d.name for d in store.state.compareList] == ["Goa"]


def test_state_survives_reload(tmp_path):
    first = TravelStore(directory=str(tmp_path), name="travelai-storage")
    first.set_preferences(TravelPreferences(budget="50000", locationTypes=["Beach", "Beach"]))
    first.set_destinations([Destination(name="Goa", country="India")])

    path = tmp_path / "travelai-storage.json"
    assert path.exists()
    assert json.loads(path.read_text())["destinations"][0]["name"] == "Goa"

    second = TravelStore(directory=str(tmp_path), name="travelai-storage")
    assert second.state.preferences.budget == "50000"
    assert second.state.preferences.locationTypes == ["Beach"]
    assert second.state.destinations[0].name == "Goa"


def test_clear_all(store):
    store.set_destinations([Destination(name="Goa", country="India")])
    store.add_to_compare(Destination(name="Goa", country="India"))
    state = store.clear_all()
    assert state.destinations == [] and state.compareList == [] and state.preferences is None
    assert os.path.exists(store.path)


def test_corrupt_file_starts_empty(tmp_path):
    (tmp_path / "broken.json").write_text("{not json")
    assert TravelStore(directory=str(tmp_path), name="broken").state.destinations == []


def test_concurrent_adds_are_not_lost(store):
    original_save = store._save

    def slow_save():
        time.sleep(0.001)
        original_save()

    store._save = slow_save
    destinations = [Destination(name=f"City {i}", country="Testland") for i in range(40)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(store.add_to_compare, destinations))

    assert sorted(d.name for d in store.state.compareList) == sorted(d.name for d in destinations)

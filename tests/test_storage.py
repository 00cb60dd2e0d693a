"""Local project store"""
import json
import pytest
from engine.compute import compute
from engine.models import AppSettings, ExtraDeduction
from utils.storage import ProjectStore, ProjectNotFoundError, portfolio_totals, filter_projects
from test_engine_basics import base_inputs

def save_named(store, name, **overrides):
    inputs = base_inputs(hotel_name=name, **overrides)
    return store.save(inputs, compute(inputs))

def test_save_and_reload(tmp_path):
    store = ProjectStore(tmp_path)
    inputs = base_inputs(extra_deductions=[ExtraDeduction(name="Staff", amount=25_000)])
    saved = store.save(inputs, compute(inputs), user_id="u1")

    reloaded = ProjectStore(tmp_path).get(saved.id)
    assert reloaded.inputs == inputs
    assert reloaded.user_id == "u1"
    assert reloaded.summary.monthly_revenue == 684_000
    assert reloaded.last_modified > 0

def test_summary_is_narrow_projection(tmp_path):
    inputs = base_inputs(include_financials=True, property_value=40_000_000)
    metrics = compute(inputs)
    saved = ProjectStore(tmp_path).save(inputs, metrics)
    assert saved.summary.monthly_net == metrics.monthly_net
    assert saved.summary.roi == metrics.roi
    assert saved.summary.valuation == metrics.valuation

def test_update_keeps_id(tmp_path):
    store = ProjectStore(tmp_path)
    first = save_named(store, "Hill Top")
    inputs = base_inputs(hotel_name="Hill Top", room_price=1500)
    second = store.save(inputs, compute(inputs), project_id=first.id)
    assert second.id == first.id
    projects = store.list_projects()
    assert len(projects) == 1
    assert projects[0].inputs.room_price == 1500

def test_delete(tmp_path):
    store = ProjectStore(tmp_path)
    p = save_named(store, "Lake Side")
    store.delete(p.id)
    assert store.list_projects() == []
    with pytest.raises(ProjectNotFoundError):
        store.delete(p.id)
    with pytest.raises(ProjectNotFoundError):
        store.get(p.id)

def test_list_filters_by_user(tmp_path):
    store = ProjectStore(tmp_path)
    a = base_inputs(hotel_name="A")
    store.save(a, compute(a), user_id="u1")
    store.save(a, compute(a), user_id="u2")
    assert len(store.list_projects()) == 2
    assert len(store.list_projects(user_id="u1")) == 1

def test_corrupt_file_reads_as_empty(tmp_path):
    (tmp_path / "projects.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "settings.json").write_text("[]", encoding="utf-8")
    store = ProjectStore(tmp_path)
    assert store.list_projects() == []
    assert store.load_settings() == AppSettings()

def test_malformed_record_skipped(tmp_path):
    store = ProjectStore(tmp_path)
    good = save_named(store, "Good")
    docs = json.loads((tmp_path / "projects.json").read_text(encoding="utf-8"))
    docs.append({"inputs": {}})
    (tmp_path / "projects.json").write_text(json.dumps(docs), encoding="utf-8")
    assert [p.id for p in store.list_projects()] == [good.id]

def test_settings_round_trip(tmp_path):
    store = ProjectStore(tmp_path)
    assert store.load_settings().currency_symbol == "₹"
    store.save_settings(AppSettings(user_name="Asha", currency_symbol="$", default_interest_rate=9.25))
    loaded = ProjectStore(tmp_path).load_settings()
    assert loaded == AppSettings(user_name="Asha", currency_symbol="$", default_interest_rate=9.25)

def test_portfolio_totals(tmp_path):
    store = ProjectStore(tmp_path)
    save_named(store, "One")
    save_named(store, "Two", total_rooms=20)
    totals = portfolio_totals(store.list_projects())
    assert totals["count"] == 2
    assert totals["total_rooms"] == 52
    assert totals["total_monthly_revenue"] > 684_000

def test_filter_and_sort(tmp_path):
    store = ProjectStore(tmp_path)
    save_named(store, "Sea View", room_price=2500)
    save_named(store, "Sea Breeze", room_price=800)
    save_named(store, "Hill Top", room_price=1200)
    projects = store.list_projects()

    names = [p.inputs.hotel_name for p in filter_projects(projects, "sea", "net")]
    assert names == ["Sea View", "Sea Breeze"]

    by_val = [p.inputs.hotel_name for p in filter_projects(projects, "", "valuation")]
    assert by_val[0] == "Sea View"
    assert len(filter_projects(projects, "", "unknown")) == 3

"""Local JSON persistence for saved projects and app settings."""

import json
import time
import uuid
from dataclasses import asdict
from pathlib import Path

from loguru import logger

from engine.models import AppSettings, InputState, MetricSummary, SavedProject

PROJECTS_FILE = "projects.json"
SETTINGS_FILE = "settings.json"

SORT_KEYS = {
    "date": lambda p: p.last_modified,
    "valuation": lambda p: p.summary.valuation or 0,
    "net": lambda p: p.summary.monthly_net,
}


class ProjectNotFoundError(KeyError):
    """Raised when a project id is not in the store."""


def _now_ms():
    return int(time.time() * 1000)


class ProjectStore:
    """Projects and settings kept as JSON documents under one directory."""

    def __init__(self, data_dir):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    # --- raw documents ---

    def _read(self, name, default):
        path = self.data_dir / name
        if not path.exists():
            return default
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring unreadable {path}: {e}")
            return default

    def _write(self, name, payload):
        path = self.data_dir / name
        tmp = path.with_suffix(".tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(path)

    # --- projects ---

    def list_projects(self, user_id=None):
        docs = self._read(PROJECTS_FILE, [])
        if not isinstance(docs, list):
            logger.warning(f"{PROJECTS_FILE} is not a list; treating as empty")
            return []
        projects = []
        for doc in docs:
            try:
                projects.append(SavedProject.from_dict(doc))
            except (KeyError, TypeError) as e:
                logger.warning(f"Skipping malformed project record: {e}")
        if user_id is not None:
            projects = [p for p in projects if p.user_id == user_id]
        return projects

    def get(self, project_id):
        for p in self.list_projects():
            if p.id == project_id:
                return p
        raise ProjectNotFoundError(project_id)

    def save(self, inputs: InputState, metrics, project_id=None, user_id=None):
        """Insert or update a project with a fresh summary of `metrics`."""
        projects = self.list_projects()
        project = SavedProject(
            id=project_id or uuid.uuid4().hex,
            last_modified=_now_ms(),
            inputs=inputs,
            summary=MetricSummary.from_metrics(metrics),
            user_id=user_id,
        )
        replaced = False
        for idx, p in enumerate(projects):
            if p.id == project.id:
                projects[idx] = project
                replaced = True
                break
        if not replaced:
            projects.append(project)

        self._write(PROJECTS_FILE, [p.to_dict() for p in projects])
        logger.info(f"{'Updated' if replaced else 'Created'} project {project.id} ({inputs.hotel_name or 'untitled'})")
        return project

    def delete(self, project_id):
        projects = self.list_projects()
        remaining = [p for p in projects if p.id != project_id]
        if len(remaining) == len(projects):
            raise ProjectNotFoundError(project_id)
        self._write(PROJECTS_FILE, [p.to_dict() for p in remaining])
        logger.info(f"Deleted project {project_id}")

    # --- settings ---

    def load_settings(self):
        data = self._read(SETTINGS_FILE, {})
        if not isinstance(data, dict):
            return AppSettings()
        known = AppSettings.__dataclass_fields__.keys()
        return AppSettings(**{k: v for k, v in data.items() if k in known})

    def save_settings(self, settings: AppSettings):
        self._write(SETTINGS_FILE, asdict(settings))
        logger.info("Saved app settings")
        return settings


def portfolio_totals(projects):
    """Aggregate figures for the portfolio dashboard."""
    return {
        "count": len(projects),
        "total_valuation": sum(p.summary.valuation or 0 for p in projects),
        "total_monthly_net": sum(p.summary.monthly_net for p in projects),
        "total_monthly_revenue": sum(p.summary.monthly_revenue for p in projects),
        "total_rooms": sum(int(p.inputs.total_rooms or 0) for p in projects),
    }


def filter_projects(projects, search="", sort_by="date"):
    """Case-insensitive name search, newest/highest first."""
    term = (search or "").lower()
    matched = [p for p in projects if term in (p.inputs.hotel_name or "").lower()]
    key = SORT_KEYS.get(sort_by)
    if key is None:
        return matched
    return sorted(matched, key=key, reverse=True)

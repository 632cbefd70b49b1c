"""
Catalog providers for the career analysis pipeline
Supplies the demand, role and course catalogs plus the skill category lookup
"""

import copy
import json
import logging
from typing import Dict, List, Any, Optional

import catalog_data
from career_schemas import DemandSkill, JobRole, CourseRecommendation
from exceptions import CatalogError

logger = logging.getLogger(__name__)

# Required keys per catalog section and the kind of value each holds
_REQUIRED_FIELDS = {
    'demand_skills': {
        'name': 'text',
        'category': 'text',
        'recommended_level': 'level',
        'importance': 'level',
    },
    'job_roles': {
        'title': 'text',
        'required_skills': 'text_list',
        'description': 'text',
    },
    'courses': {
        'title': 'text',
        'provider': 'text',
        'skills_covered': 'text_list',
        'difficulty': 'text',
        'duration': 'text',
    },
}

LEVEL_MIN = 1
LEVEL_MAX = 5


def _is_valid(kind: str, value: Any) -> bool:
    if kind == 'text':
        return isinstance(value, str) and bool(value.strip())
    if kind == 'level':
        # bool is an int subclass but never a valid level
        return isinstance(value, int) and not isinstance(value, bool) and LEVEL_MIN <= value <= LEVEL_MAX
    if kind == 'text_list':
        return isinstance(value, list) and all(isinstance(item, str) for item in value)
    raise ValueError(f"Unknown catalog field kind: {kind}")


_KIND_DESCRIPTIONS = {
    'text': 'a non-empty string',
    'level': f'an integer from {LEVEL_MIN} to {LEVEL_MAX}',
    'text_list': 'a list of strings',
}


class CatalogProvider:
    """Interface for catalog sources. Entries are returned in catalog order."""

    def demand_skills(self) -> List[DemandSkill]:
        raise NotImplementedError

    def job_roles(self) -> List[JobRole]:
        raise NotImplementedError

    def courses(self) -> List[CourseRecommendation]:
        raise NotImplementedError

    def skill_categories(self) -> Dict[str, str]:
        raise NotImplementedError

    def category_for_skill(self, skill_name: str) -> str:
        """Look up a skill's category, defaulting to "Other" on a miss"""
        key = (skill_name or '').strip().lower()
        return self.skill_categories().get(key, catalog_data.DEFAULT_CATEGORY)


class StaticCatalogProvider(CatalogProvider):
    """Serves the catalogs shipped in catalog_data"""

    def __init__(self, demand_skills=None, job_roles=None, courses=None, skill_categories=None):
        self._demand_skills = demand_skills if demand_skills is not None else catalog_data.DEMAND_SKILLS
        self._job_roles = job_roles if job_roles is not None else catalog_data.JOB_ROLES
        self._courses = courses if courses is not None else catalog_data.COURSES
        categories = skill_categories if skill_categories is not None else catalog_data.SKILL_CATEGORIES
        self._skill_categories = {k.strip().lower(): v for k, v in categories.items()}

    # Copies keep callers from editing the shared tables
    def demand_skills(self) -> List[DemandSkill]:
        return copy.deepcopy(self._demand_skills)

    def job_roles(self) -> List[JobRole]:
        return copy.deepcopy(self._job_roles)

    def courses(self) -> List[CourseRecommendation]:
        return copy.deepcopy(self._courses)

    def skill_categories(self) -> Dict[str, str]:
        return dict(self._skill_categories)


class JsonCatalogProvider(StaticCatalogProvider):
    """
    Loads catalogs from a JSON file.

    The file may hold any of the sections ``demand_skills``, ``job_roles``,
    ``courses`` and ``skill_categories``; absent sections keep the shipped
    defaults. Entries with missing or wrongly typed fields raise CatalogError
    at load time.
    """

    def __init__(self, path: str):
        self.path = path
        data = self._load(path)
        super().__init__(
            demand_skills=data.get('demand_skills'),
            job_roles=data.get('job_roles'),
            courses=data.get('courses'),
            skill_categories=data.get('skill_categories'),
        )
        logger.info(f"Loaded catalog overrides from {path}: {sorted(data.keys())}")

    @staticmethod
    def _load(path: str) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogError(f"Cannot read catalog file {path}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError(f"Catalog file {path} must contain a JSON object")

        for section, fields in _REQUIRED_FIELDS.items():
            if section not in data:
                continue
            entries = data[section]
            if not isinstance(entries, list):
                raise CatalogError(f"Catalog section '{section}' must be a list")
            for index, entry in enumerate(entries):
                if not isinstance(entry, dict):
                    raise CatalogError(f"Catalog section '{section}' entry {index} is not an object")
                missing = [field for field in fields if field not in entry]
                if missing:
                    raise CatalogError(
                        f"Catalog section '{section}' entry {index} is missing {', '.join(missing)}"
                    )
                for field, kind in fields.items():
                    if not _is_valid(kind, entry[field]):
                        raise CatalogError(
                            f"Catalog section '{section}' entry {index}: "
                            f"'{field}' must be {_KIND_DESCRIPTIONS[kind]}"
                        )

        categories = data.get('skill_categories')
        if categories is not None:
            if not isinstance(categories, dict):
                raise CatalogError("Catalog section 'skill_categories' must be an object")
            bad = [name for name, category in categories.items() if not _is_valid('text', category)]
            if bad:
                raise CatalogError(f"Catalog section 'skill_categories' has invalid categories for {', '.join(bad)}")

        return data


def get_catalog_provider(config: Optional[Dict[str, Any]] = None) -> CatalogProvider:
    """Build the catalog provider selected by CAREER_CATALOG_PATH"""
    path = (config or {}).get('CAREER_CATALOG_PATH')
    if path:
        return JsonCatalogProvider(path)
    return StaticCatalogProvider()

"""``package.json`` generation.

The template manifest is deep-merged with the collected project answers and
written with keys in the conventional npm order (the order used by
``sort-package-json``), so regenerated manifests produce small, stable diffs.
"""

from __future__ import annotations

import copy
from typing import Any

from skategen.models import ProjectAnswers

# Well-known top-level keys, in order.  Unknown keys follow alphabetically.
CANONICAL_KEY_ORDER: list[str] = [
    "$schema",
    "name",
    "displayName",
    "version",
    "private",
    "description",
    "categories",
    "keywords",
    "homepage",
    "bugs",
    "repository",
    "funding",
    "license",
    "author",
    "maintainers",
    "contributors",
    "sideEffects",
    "type",
    "imports",
    "exports",
    "main",
    "umd:main",
    "jsdelivr",
    "unpkg",
    "module",
    "source",
    "jsnext:main",
    "browser",
    "types",
    "typings",
    "style",
    "example",
    "assets",
    "bin",
    "man",
    "directories",
    "files",
    "workspaces",
    "scripts",
    "config",
    "babel",
    "browserslist",
    "eslintConfig",
    "eslintIgnore",
    "prettier",
    "stylelint",
    "ava",
    "jest",
    "mocha",
    "nyc",
    "resolutions",
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "peerDependenciesMeta",
    "optionalDependencies",
    "bundledDependencies",
    "bundleDependencies",
    "packageManager",
    "engines",
    "engineStrict",
    "os",
    "cpu",
    "preferGlobal",
    "publishConfig",
]

PERSON_KEY_ORDER: list[str] = ["name", "email", "url"]

DEPENDENCY_KEYS: frozenset[str] = frozenset(
    {
        "dependencies",
        "devDependencies",
        "peerDependencies",
        "optionalDependencies",
        "resolutions",
        "engines",
    }
)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *override* into a copy of *base*.

    Nested dicts are merged key by key; ``None`` values in *override* leave
    the base value in place.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if value is None:
            continue
        if isinstance(value, dict):
            current = merged.get(key)
            merged[key] = deep_merge(current if isinstance(current, dict) else {}, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def build_manifest(template: dict[str, Any], answers: ProjectAnswers) -> dict[str, Any]:
    """Merge *answers* into the *template* manifest.

    ``author.name`` and ``author.email`` are only set when provided, and an
    ``author`` with neither is left out.  The description keeps the template
    default when none was given.
    """
    manifest = deep_merge(
        template,
        {
            "name": answers.component_name,
            "description": answers.description,
            "author": {
                "name": answers.author_name,
                "email": answers.author_email,
            },
        },
    )
    if not manifest.get("author"):
        manifest.pop("author", None)
    return manifest


def sort_manifest(manifest: dict[str, Any]) -> dict[str, Any]:
    """Return *manifest* with keys in canonical order."""
    rank = {key: i for i, key in enumerate(CANONICAL_KEY_ORDER)}
    ordered_keys = sorted(
        manifest,
        key=lambda k: (0, rank[k], "") if k in rank else (1, 0, k),
    )

    result: dict[str, Any] = {}
    for key in ordered_keys:
        value = manifest[key]
        if key in DEPENDENCY_KEYS and isinstance(value, dict):
            value = dict(sorted(value.items()))
        elif key in ("author", "maintainers", "contributors"):
            value = _sort_people(value)
        result[key] = value
    return result


def _sort_people(value: Any) -> Any:
    if isinstance(value, list):
        return [_sort_people(item) for item in value]
    if not isinstance(value, dict):
        return value
    rank = {key: i for i, key in enumerate(PERSON_KEY_ORDER)}
    return {
        key: value[key]
        for key in sorted(value, key=lambda k: (rank.get(k, len(rank)), k))
    }

from __future__ import annotations

import socket
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from dotenv import load_dotenv

from .catalog import PromptCatalog, load_default_catalog
from .config import load_settings
from .selector import SCORING_RULES


def _check_dns(host: str) -> tuple[bool, str]:
    try:
        socket.gethostbyname(host)
        return True, "resolved"
    except Exception as exc:  # pragma: no cover
        return False, str(exc)


def run_preflight(
    project_root: str | Path | None = None,
    catalog: PromptCatalog | None = None,
    check_network: bool = True,
) -> dict[str, Any]:
    root = Path(project_root) if project_root else Path(__file__).resolve().parents[1]
    load_dotenv(root / ".env", override=False)
    settings = load_settings()
    catalog = catalog or load_default_catalog()

    checks: list[dict[str, Any]] = []

    def add(name: str, ok: bool, severity: str, detail: str) -> None:
        checks.append({"name": name, "ok": ok, "severity": severity, "detail": detail})

    add("project_root", root.exists(), "fail", str(root))
    add("env_file", (root / ".env").exists(), "warn", str(root / ".env"))
    add(
        "gemini_api_key",
        settings.has_api_key,
        "fail",
        "Required before any assistant can call the generation API",
    )

    drift = catalog.drift_report()
    add(
        "prompt_catalog",
        not drift,
        "fail",
        "; ".join(drift) if drift else f"{len(catalog)} features, defaults resolve",
    )

    unscored = [key for key in catalog.feature_keys() if key not in SCORING_RULES]
    add(
        "selection_rules",
        True,
        "info",
        f"priority-only selection for: {', '.join(unscored)}" if unscored else "all features have rules",
    )

    if check_network:
        host = urlparse(settings.gemini_base_url).hostname or ""
        ok, detail = _check_dns(host)
        add(f"dns:{host}", ok, "warn", detail)

    failed = [c for c in checks if not c["ok"] and c["severity"] == "fail"]
    warnings = [c for c in checks if not c["ok"] and c["severity"] == "warn"]

    status = "ok"
    if failed:
        status = "fail"
    elif warnings:
        status = "warn"

    return {
        "status": status,
        "settings": {
            "gemini_model": settings.gemini_model,
            "gemini_base_url": settings.gemini_base_url,
            "gemini_timeout_seconds": settings.gemini_timeout_seconds,
            "log_level": settings.log_level,
        },
        "summary": {
            "passed": len([c for c in checks if c["ok"]]),
            "failed": len(failed),
            "warnings": len(warnings),
        },
        "checks": checks,
    }


def promote_warnings(report: dict[str, Any]) -> dict[str, Any]:
    if report.get("summary", {}).get("warnings", 0) > 0 and report["status"] != "fail":
        report["status"] = "fail"
        report["strict_override"] = "warnings_promoted_to_failures"
    return report

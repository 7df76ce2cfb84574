from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .assistants import build_assistants
from .catalog import load_default_catalog
from .config import load_settings
from .errors import InsureAssistError
from .invocation import request_body_for
from .preflight import promote_warnings, run_preflight
from .utils.llm_factory import get_generation_client
from .utils.logging_setup import configure_logging


def _json_print(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=True))


def _parse_pairs(pairs: list[str] | None, option: str) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise argparse.ArgumentTypeError(f"{option} expects KEY=VALUE, got {pair!r}")
        parsed[key.strip()] = value
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="insureassist", description="InsureAssist CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    web = sub.add_parser("serve-web", help="Run the InsureAssist web interface")
    web.add_argument("--host", default="127.0.0.1")
    web.add_argument("--port", type=int, default=8000)
    web.add_argument("--reload", action="store_true")

    doctor = sub.add_parser("doctor", help="Run environment and catalog preflight checks")
    doctor.add_argument("--strict", action="store_true", help="Treat warnings as failures")

    listing = sub.add_parser("list-prompts", help="Show the prompt catalog")
    listing.add_argument("--feature", default=None)

    for name, help_text in (
        ("preview", "Resolve a prompt and print the request body without calling the API"),
        ("ask", "Resolve a prompt and call the generation API"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("feature")
        cmd.add_argument("--var", action="append", default=[], help="KEY=VALUE input field")
        cmd.add_argument("--criterion", action="append", default=[], help="KEY=VALUE selection hint")

    return parser


def main(argv: list[str] | None = None) -> None:
    project_root = Path(__file__).resolve().parents[1]
    load_dotenv(project_root / ".env", override=False)

    settings = load_settings()
    configure_logging(settings.log_level)
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve-web":
        import uvicorn

        uvicorn.run(
            "insureassist.web_app:create_web_app",
            host=args.host,
            port=args.port,
            reload=bool(args.reload),
            factory=True,
        )
        return

    if args.command == "doctor":
        report = run_preflight(project_root=project_root)
        if args.strict:
            promote_warnings(report)
        _json_print(report)
        return

    catalog = load_default_catalog()

    if args.command == "list-prompts":
        keys = [args.feature] if args.feature else list(catalog.feature_keys())
        payload: dict[str, Any] = {}
        for key in keys:
            if key not in catalog:
                _json_print({"error": "unknown_feature", "detail": key})
                return
            payload[key] = {
                "agent_info": catalog.get_agent_info(key).to_dict(),
                "default_prompt": catalog.default_prompt_id(key),
                "prompts": [
                    {k: v for k, v in variant.to_dict().items() if k != "prompt"}
                    for variant in catalog.list_variants(key)
                ],
            }
        _json_print(payload)
        return

    try:
        variables = _parse_pairs(args.var, "--var")
        criteria = _parse_pairs(args.criterion, "--criterion")
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    assistants = build_assistants(catalog, get_generation_client(settings))
    assistant = assistants.get(args.feature)
    if assistant is None:
        _json_print({"error": "unknown_feature", "detail": args.feature})
        return

    if args.command == "preview":
        try:
            invocation = assistant.preview(variables, criteria)
        except InsureAssistError as exc:
            _json_print({"error": "preview_failed", "detail": str(exc)})
            return
        _json_print(
            {
                "prompt_id": invocation.prompt_id,
                "prompt": invocation.prompt,
                "request_body": request_body_for(invocation),
            }
        )
        return

    if args.command == "ask":
        try:
            result = assistant.run(variables, criteria)
        except InsureAssistError as exc:
            _json_print(
                {
                    "error": "ask_failed",
                    "detail": str(exc),
                    "hint": "Run `python -m insureassist.cli doctor` to check configuration.",
                }
            )
            return
        _json_print(result.to_dict())
        return

    parser.error("Unknown command")


if __name__ == "__main__":
    main()

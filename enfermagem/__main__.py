"""Command line access to the clinical rules."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .core.logging import setup_logging
from .core.orchestrator import assess
from .core.rules.engine import classify_vital
from .core.scores import run_scores

logger = logging.getLogger("enfermagem.cli")


def _load_entry(path: str) -> Dict[str, Any]:
    source = Path(path).expanduser()
    if not source.exists():
        raise SystemExit(f"Arquivo {source} não encontrado")
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"JSON inválido em {source}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"{source} deve conter um objeto JSON")
    return data


def _print(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="enfermagem", description="Regras clínicas de enfermagem")
    commands = parser.add_subparsers(dest="command", required=True)

    classify = commands.add_parser("classificar", help="Classifica um sinal vital")
    classify.add_argument("sign", help="Sinal vital (bloodPressure, temperature...)")
    classify.add_argument("value", help="Valor digitado, ex.: 120/80 ou 37,8")

    evaluate = commands.add_parser("avaliar", help="Avalia um relatório completo em JSON")
    evaluate.add_argument("path", help="Arquivo JSON com os campos do formulário")

    scales = commands.add_parser("escalas", help="Calcula apenas as escalas de um relatório JSON")
    scales.add_argument("path", help="Arquivo JSON com os campos do formulário")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging()

    if args.command == "classificar":
        _print(classify_vital(args.sign, args.value).model_dump(exclude_none=True))
    elif args.command == "avaliar":
        _print(assess(_load_entry(args.path)).model_dump(mode="json", by_alias=True))
    elif args.command == "escalas":
        results = run_scores(_load_entry(args.path))
        _print({name: result.model_dump() for name, result in results.items()})
    logger.debug("Comando %s concluído", args.command)


if __name__ == "__main__":
    main()

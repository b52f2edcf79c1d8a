"""CLI del motor de inferencia diagnóstica."""

import sys
import json
import argparse
from typing import Callable

from .utils import Config, setup_logger
from .exceptions import DataIntegrityError, UnknownSymptomError
from .knowledge import (
    DEFAULT_KNOWLEDGE_BASE,
    KnowledgeBaseValidator,
    knowledge_base_from_dict,
    load_knowledge_base,
    parse_symptoms,
    read_document,
)
from .diagnostics import InferenceEngine


config = Config()
logger = setup_logger(
    "cli",
    log_file=config.reports_dir / "cli.log",
    level=config.log_level,
    format_type=config.log_format
)


# ============================================================================
# FUNCIONES HELPER
# ============================================================================

def print_section(title: str, width: int = 60):
    """Imprime una sección con formato."""
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def print_error(message: str):
    """Imprime un mensaje de error."""
    print(f"❌ Error: {message}", file=sys.stderr)


def execute_command(command_name: str, func: Callable) -> int:
    """Ejecuta un comando con manejo de errores estandarizado."""
    try:
        return func()
    except (DataIntegrityError, UnknownSymptomError) as e:
        logger.error(f"Error en {command_name}: {e}")
        print_error(f"{command_name}: {e}")
        return 1
    except Exception as e:
        logger.error(f"Error en {command_name}: {e}", exc_info=True)
        print_error(f"{command_name}: {e}")
        return 1


def _kb_path(args):
    return args.kb if args.kb else config.kb_path


# ============================================================================
# COMANDOS
# ============================================================================

def cmd_diagnose(args):
    """Ejecuta inferencia sobre los síntomas indicados."""
    logger.info("Comando: Diagnose")
    
    def execute():
        facts = parse_symptoms(args.symptoms)
        kb = load_knowledge_base(_kb_path(args))
        results = InferenceEngine(kb).infer(facts)
        
        if args.json:
            print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
            return 0
        
        print_section("DIAGNÓSTICO")
        print(f"Síntomas: {', '.join(sorted(s.value for s in facts))}")
        if not results:
            print("Sin diagnósticos por encima del umbral")
        for i, result in enumerate(results, 1):
            print(f"\n{i}. {result.disease_name} ({result.score_percent}%)")
            print(f"   {result.explanation}")
        print("=" * 60 + "\n")
        return 0
    
    return execute_command("Diagnose", execute)


def cmd_symptoms(args):
    """Lista el catálogo de síntomas."""
    def execute():
        kb = load_knowledge_base(_kb_path(args))
        print_section(f"SÍNTOMAS (v{kb.version})")
        for symptom in kb.symptoms:
            synonyms = ", ".join(symptom.synonyms)
            print(f"{symptom.id.value:<20} {symptom.label:<22} {synonyms}")
        return 0
    
    return execute_command("Symptoms", execute)


def cmd_rules(args):
    """Lista las reglas con su prioridad."""
    def execute():
        kb = load_knowledge_base(_kb_path(args))
        print_section(f"REGLAS (v{kb.version})")
        for rule in kb.rules:
            antecedents = "+".join(s.value for s in rule.antecedents)
            exclusions = "+".join(s.value for s in rule.exclusions) or "-"
            print(
                f"{rule.id:<5} {rule.conclusion:<18} si {antecedents} "
                f"| excluye {exclusions} | prioridad {rule.priority}"
            )
        return 0
    
    return execute_command("Rules", execute)


def cmd_validate(args):
    """Valida un archivo de base de conocimiento sin cargarlo."""
    logger.info("Comando: Validate")
    
    def execute():
        path = _kb_path(args)
        if path is None:
            print("Sin KB_PATH: se valida el catálogo integrado")
            kb = DEFAULT_KNOWLEDGE_BASE
        else:
            kb = knowledge_base_from_dict(read_document(path))
        result = KnowledgeBaseValidator.validate(kb, strict=args.strict)
        
        print_section("VALIDACIÓN")
        for error in result.errors:
            print(f"[X] {error}")
        for warning in result.warnings:
            print(f"[!] {warning}")
        print(f"\n{'VÁLIDA' if result.valid else 'INVÁLIDA'}: "
              f"{len(result.errors)} errores, {len(result.warnings)} advertencias")
        return 0 if result.valid else 1
    
    return execute_command("Validate", execute)


def main(argv=None):
    """Función principal del CLI."""
    parser = argparse.ArgumentParser(
        description="Motor de inferencia diagnóstica basado en reglas",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Comandos disponibles")
    
    # Comando Diagnose
    parser_diagnose = subparsers.add_parser("diagnose", help="Diagnosticar a partir de síntomas")
    parser_diagnose.add_argument("symptoms", nargs="+", help="Ids de síntoma (p. ej. fever cough)")
    parser_diagnose.add_argument("--kb", help="Archivo JSON de base de conocimiento (opcional)")
    parser_diagnose.add_argument("--json", action="store_true", help="Salida en JSON")
    parser_diagnose.set_defaults(func=cmd_diagnose)
    
    # Comando Symptoms
    parser_symptoms = subparsers.add_parser("symptoms", help="Listar síntomas")
    parser_symptoms.add_argument("--kb", help="Archivo JSON de base de conocimiento (opcional)")
    parser_symptoms.set_defaults(func=cmd_symptoms)
    
    # Comando Rules
    parser_rules = subparsers.add_parser("rules", help="Listar reglas")
    parser_rules.add_argument("--kb", help="Archivo JSON de base de conocimiento (opcional)")
    parser_rules.set_defaults(func=cmd_rules)
    
    # Comando Validate
    parser_validate = subparsers.add_parser("validate", help="Validar base de conocimiento")
    parser_validate.add_argument("--kb", help="Archivo JSON de base de conocimiento (opcional)")
    parser_validate.add_argument("--strict", action="store_true", help="Rechazar solapamientos parciales")
    parser_validate.set_defaults(func=cmd_validate)
    
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

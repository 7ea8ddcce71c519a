"""Command-line entry point for the retirement planning advisor."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from retirement_advisor.agents.chat import (
    MODEL_REGISTRY,
    AgentBuildError,
    ModelRegistryError,
    build_agent,
    create_model_client,
    resolve_system_prompt,
)
from retirement_advisor.tools.lib.config_loader import AdvisorConfig, ConfigError, load_base_config
from retirement_advisor.tools.lib.profile_store import PROFILE_PATH_ENV, ProfileStore
from retirement_advisor.tools.lib.tool_loader import ToolRegistryError, load_tool_registry

EXIT_COMMANDS = {"exit", "/exit", "quit", ":q"}

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Conversational retirement planning advisor.")
    parser.add_argument("--config-file", type=str, help="Override the default config.yaml path.")
    parser.add_argument(
        "--model",
        type=str,
        help=f"Override the model (supported: {', '.join(sorted(MODEL_REGISTRY))}).",
    )
    parser.add_argument("--profile-path", type=str, help="Read and write the profile at this path.")
    parser.add_argument("--show-profile", action="store_true", help="Print the saved profile and exit.")
    parser.add_argument("--delete-profile", action="store_true", help="Delete the saved profile and exit.")
    parser.add_argument(
        "--single",
        action="store_true",
        help="Run a single-turn interaction (default is interactive mode).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr.",
    )
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> AdvisorConfig:
    base_config = load_base_config(Path(args.config_file) if args.config_file else None)
    return base_config.apply_overrides(
        model=args.model,
        log_level="DEBUG" if args.verbose else None,
        profile_path=args.profile_path,
    )


def configure_logging(config: AdvisorConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def apply_profile_path(config: AdvisorConfig, environ: Dict[str, str]) -> None:
    """Point every ProfileStore at the configured path for this process."""

    if config.profile_path:
        environ[PROFILE_PATH_ENV] = str(Path(config.profile_path).expanduser())


def show_profile(store: ProfileStore) -> int:
    result = store.load()
    if result.error:
        print(f"Unable to read profile: {result.error}", file=sys.stderr)
        return 1
    if not result.found or result.profile is None:
        print(f"No saved profile at {store.path}")
        return 0
    print(json.dumps(result.profile.to_dict(), indent=2))
    return 0


def delete_profile(store: ProfileStore) -> int:
    if store.delete():
        print(f"Deleted profile at {store.path}")
        return 0
    print(f"No profile to delete at {store.path}", file=sys.stderr)
    return 1


def extract_text_from_message(message: Dict[str, Any]) -> str:
    """Concatenate text blocks from a Strands message."""

    chunks: List[str] = []
    for block in message.get("content", []):
        if isinstance(block, dict) and "text" in block:
            text = block.get("text")
            if isinstance(text, str):
                chunks.append(text)
    return "\n".join(chunks).strip()


def collect_single_input(prompt: str = "You> ") -> Optional[str]:
    """Collect a single line of input from stdin or the terminal."""

    if not sys.stdin.isatty():
        data = sys.stdin.read().strip()
        return data or None
    try:
        value = input(prompt)
    except EOFError:
        return None
    return value.strip() or None


def execute_turn(agent: Any, user_input: str) -> Optional[str]:
    """Run a single agent invocation and return the assistant's text."""

    try:
        result = agent(user_input)
    except Exception as exc:  # pragma: no cover - provider/network failures
        logger.exception("Agent execution failed")
        print(f"Agent execution failed: {exc}", file=sys.stderr)
        return None
    return extract_text_from_message(result.message) or "[No response]"


def run_single_turn(agent: Any) -> int:
    user_input = collect_single_input()
    if not user_input:
        print("No input provided; exiting.", file=sys.stderr)
        return 1
    response = execute_turn(agent, user_input)
    if response is None:
        return 1
    print(f"Assistant: {response}")
    return 0


def run_interactive_loop(agent: Any) -> int:
    """Enter interactive chat mode until the user exits."""

    print("Enter '/exit' or press Ctrl-D to leave the session.")
    while True:
        try:
            user_input = input("You> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break

        if not user_input:
            continue
        if user_input.lower() in EXIT_COMMANDS:
            break

        response = execute_turn(agent, user_input)
        if response is not None:
            print(f"Assistant: {response}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    configure_logging(config)
    apply_profile_path(config, os.environ)
    store = ProfileStore()

    if args.show_profile:
        return show_profile(store)
    if args.delete_profile:
        return delete_profile(store)

    try:
        system_prompt = resolve_system_prompt(config.system_prompt_file)
    except OSError as exc:
        print(f"System prompt error: {exc}", file=sys.stderr)
        return 1

    try:
        tools = load_tool_registry()
    except ToolRegistryError as exc:
        print(f"Tool registry error: {exc}", file=sys.stderr)
        return 1

    try:
        model_client = create_model_client(config.model)
        agent = build_agent(model_client=model_client, system_prompt=system_prompt, tools=tools)
    except (ModelRegistryError, AgentBuildError) as exc:
        print(f"Model configuration error: {exc}", file=sys.stderr)
        return 1

    print("Retirement Planning Advisor")
    print(f"Model: {config.model}")
    print(f"Profile: {store.path}")
    logger.debug("Loaded %d tools", len(tools))

    if args.single:
        return run_single_turn(agent)
    return run_interactive_loop(agent)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

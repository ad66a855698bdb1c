"""
Command line entry point for inspecting the agent network.

    python -m agent_network nav              # print the RAG reference menu
    python -m agent_network nav pinecone     # print one title
    python -m agent_network agents           # list agents
    python -m agent_network agents "Weather Agent"
"""

import argparse
import logging
import sys

from agent_network.agents import build_agent_registry
from agent_network.config import load_settings
from agent_network.docs import RAG_REFERENCE_NAV
from agent_network.errors import AgentNotFoundError, ConfigurationError, NavigationLookupError


def show_navigation(slug: str | None) -> int:
    if slug is None:
        for entry in RAG_REFERENCE_NAV.menu():
            print(f"{entry.slug:<20} {entry.title}")
        return 0

    try:
        print(RAG_REFERENCE_NAV.title(slug))
    except NavigationLookupError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def show_agents(name: str | None) -> int:
    try:
        registry = build_agent_registry(load_settings())
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if name is None:
        for summary in registry.summaries():
            tools = ", ".join(summary.tools) if summary.tools else "-"
            print(f"{summary.name:<26} {summary.model:<45} tools: {tools}")
        return 0

    try:
        agent = registry.get(name)
    except AgentNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Available agents: {', '.join(registry.names())}", file=sys.stderr)
        return 1

    print(f"Name:  {agent.name}")
    print(f"Model: {agent.model.identifier}")
    print(f"Tools: {', '.join(agent.tools) if agent.tools else '-'}")
    print()
    print(agent.instructions)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="agent_network",
        description="Inspect the RAG reference navigation and the agent registry",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    nav = subparsers.add_parser("nav", help="Show RAG reference navigation labels")
    nav.add_argument("slug", nargs="?", help="Print the title for a single slug")

    agents = subparsers.add_parser("agents", help="Show configured agents")
    agents.add_argument("name", nargs="?", help="Print one agent's instructions")

    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    if args.command == "nav":
        return show_navigation(args.slug)
    return show_agents(args.name)

#!/usr/bin/env python3
"""
Basic agenntic example using MockModel.

This example demonstrates the core concepts without requiring an LLM.
The MockModel returns predefined responses, making it ideal for:
- Testing and development
- Understanding the framework
- CI/CD pipelines

Run with: python examples/basic_mock.py
"""

import logging

from agenntic import (
    Agent,
    FilesystemWorkflowEventStore,
    MockModel,
    Task,
    TaskExecutionError,
    Workflow,
)


def main() -> None:
    """Run a two-step research-then-write workflow with scripted responses."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)-8s | %(message)s")

    # The first call fails, so the research task is retried once
    research_model = MockModel(
        responses=["Owls hunt at night and can rotate their heads 270 degrees."],
        failures=1,
    )
    writing_model = MockModel(
        responses=["Owls: silent hunters of the night sky..."],
        input_tokens=120,
        output_tokens=80,
    )

    researcher = Agent(
        role="Researcher",
        goal="Collect facts about {topic}",
        background="You are meticulous and cite your sources",
        model=research_model,
    )
    writer = Agent(
        role="Content Writer",
        goal="Write an article about {topic}",
        background="You are an expert in writing engaging content",
        model=writing_model,
    )

    research = Task(
        description="List five surprising facts about {topic}",
        agent=researcher,
        expected_output="A bullet list",
    )
    article = Task(
        description="Write a short article about {topic} using the research",
        agent=writer,
        expected_output="Around {words} words",
        dependency_tasks=[research],
    )

    # NDJSON log written under ./logs, readable with scripts/log_report.py
    store = FilesystemWorkflowEventStore("logs")
    workflow = Workflow(
        tasks=[research, article],
        agents=[researcher, writer],
        event_store=store,
    )

    try:
        result = workflow.run({"topic": "owls", "words": 300})
    except TaskExecutionError as e:
        print(f"=== FAILED after {e.attempts} attempts ===")
        return

    print("=== SUCCESS ===")
    print(f"Result: {result}")
    print(f"Research attempts: {research.retry_count + 1}")
    print(f"Tokens: {workflow.input_tokens} in / {workflow.output_tokens} out")
    print(f"Log file: {store.log_file_path}")
    print(f"Workflow id: {workflow.id}")


if __name__ == "__main__":
    main()

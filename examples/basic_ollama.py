#!/usr/bin/env python3
"""
Basic agenntic example using OllamaModel.

Requires Ollama running locally with a model installed.

Setup:
    1. Install Ollama: https://ollama.ai/
    2. Pull a model: ollama pull qwen2.5-coder:7b
    3. Run this script: python examples/basic_ollama.py
"""

from agenntic import Agent, OllamaModel, Task, Workflow


def main() -> None:
    model = OllamaModel(model="qwen2.5-coder:7b")

    reviewer = Agent(
        role="Code Reviewer",
        goal="Point out bugs in {language} code",
        background="You have reviewed code for twenty years",
        model=model,
    )
    review = Task(
        description="Review this function:\n\ndef add(a, b):\n    return a - b",
        agent=reviewer,
        expected_output="A short list of problems and a corrected version",
        max_attempts=2,
    )

    workflow = Workflow(tasks=[review], agents=[reviewer])
    print(workflow.run({"language": "Python"}))

    for event in workflow.logger.get_logs():
        print(f"{event.severity.value:5} {event.message}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Basic agenntic example using the default OpenAI model.

Setup:
    1. Put OPENAI_API_KEY in the environment or a .env file
    2. Run this script: python examples/basic_openai.py "quantum computing"

Agents created without a model use gpt-4o through OpenAIModel.
"""

import asyncio
import logging
import sys

from agenntic import Agent, Task, Workflow


async def main(topic: str) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)-8s | %(message)s")

    researcher = Agent(
        role="Researcher",
        goal="Gather accurate information about {topic}",
        background="You are a thorough analyst",
    )
    writer = Agent(
        role="Content Writer",
        goal="Write an article about {topic}",
        background="You are an expert in writing engaging content",
    )

    research = Task(
        description="Research the current state of {topic}",
        agent=researcher,
        expected_output="Key findings as a bullet list",
    )
    article = Task(
        description="Write a blog post about {topic}",
        agent=writer,
        expected_output="A 500 word blog post",
        dependency_tasks=[research],
    )

    workflow = Workflow(tasks=[research, article], agents=[researcher, writer])
    result = await workflow.initiate({"topic": topic}, strict=True)

    print(result)
    print(f"\nCompleted in {workflow.total_time * 1000:.0f} ms")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "quantum computing"))

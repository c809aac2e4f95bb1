"""
Agent base class
Shared run loop for the scoring, clustering, review and report agents.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic
from loguru import logger

from fundrank.schemas.fund import Fund

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """
    Agent base class

    Every agent subclasses this:
    - input and output types are explicit
    - failures are logged with the fund or batch they concern, then re-raised
    """

    name: str = "BaseAgent"

    def __init__(self):
        self.logger = logger.bind(agent=self.name)

    def run(self, input_data: InputT) -> OutputT:
        """
        Run the agent.

        Args:
            input_data: a single Fund, a list of funds, or an input object
                carrying a `funds` list

        Returns:
            agent output
        """
        try:
            self._validate_input(input_data)
            result = self._process(input_data)
            self._validate_output(result)
            return result

        except Exception as e:
            subject = self.describe_input(input_data)
            self.logger.bind(subject=subject).error(f"{self.name} failed on {subject}: {e}")
            raise

    @staticmethod
    def describe_input(input_data) -> str:
        """Short log label: 'fund=<id>' or 'batch=<n>'"""
        if input_data is None:
            return "no input"
        if isinstance(input_data, Fund):
            return f"fund={input_data.id}"

        funds = getattr(input_data, "funds", input_data)
        if isinstance(funds, list):
            return f"batch={len(funds)}"
        return type(input_data).__name__

    @abstractmethod
    def _process(self, input_data: InputT) -> OutputT:
        pass

    def _validate_input(self, input_data: InputT) -> None:
        if input_data is None:
            raise ValueError(f"{self.name}: input is None.")

    def _validate_output(self, output_data: OutputT) -> None:
        if output_data is None:
            raise ValueError(f"{self.name}: output is None.")

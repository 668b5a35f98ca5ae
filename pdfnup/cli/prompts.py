# PDFNup/pdfnup/cli/prompts.py
"""
Interactive terminal prompts for choices not given on the command line.
Every prompt re-asks until it gets a valid answer.
"""

import os
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from ..logic.layout_calculator import ArrangementMode
from ..logic.unit_converter import PAPER_LABELS, PAPER_SIZES

T = TypeVar("T")
InputFunc = Callable[[str], str]

OPERATIONS: List[Tuple[str, str]] = [
    ("duplicate", "Duplicate PDF pages"),
    ("combine", "Combine pages 2 in 1"),
]


class Prompter:
    """Asks questions through ``input_func`` and writes notices through ``output_func``."""

    def __init__(self, input_func: InputFunc = input, output_func=print):
        self.input_func = input_func
        self.output_func = output_func

    def ask_pdf_path(self) -> str:
        while True:
            answer = self.input_func("Enter the path to your PDF file: ").strip()
            answer = os.path.expanduser(answer.strip("'\""))
            if os.path.splitext(answer)[1].lower() != ".pdf":
                self.output_func("Please provide a PDF file")
            elif not os.path.isfile(answer):
                self.output_func("File does not exist")
            else:
                return answer

    def ask_operation(self) -> str:
        return self.choose("What operation would you like to perform?", OPERATIONS)

    def ask_copies(self) -> int:
        while True:
            answer = self.input_func("How many copies of each page do you want? ").strip()
            try:
                copies = int(answer)
            except ValueError:
                copies = 0
            if copies > 0:
                return copies
            self.output_func("Please enter a number greater than 0")

    def ask_mode(self) -> ArrangementMode:
        return self.choose(
            "Select arrangement (affects content placement):",
            [(mode, mode.label) for mode in ArrangementMode],
        )

    def ask_rotate(self) -> bool:
        return self.confirm(
            "Would you like to rotate each copy by 90 degrees (horizontally) in the grid?"
        )

    def ask_paper(self) -> Optional[str]:
        """Returns a PAPER_SIZES key, or None to keep the default."""
        if not self.confirm("Would you like to choose a common paper size for the output?"):
            return None
        return self.choose(
            "Select a paper size (output will be portrait):",
            [(key, PAPER_LABELS[key]) for key in PAPER_SIZES],
        )

    def choose(self, question: str, choices: Sequence[Tuple[T, str]]) -> T:
        """Numbered menu; returns the value of the picked choice."""
        self.output_func(question)
        for number, (_, label) in enumerate(choices, start=1):
            self.output_func(f"  {number}) {label}")

        while True:
            answer = self.input_func(f"Choice [1-{len(choices)}]: ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1][0]
            self.output_func(f"Please enter a number between 1 and {len(choices)}")

    def confirm(self, question: str, default: bool = False) -> bool:
        hint = "Y/n" if default else "y/N"
        while True:
            answer = self.input_func(f"{question} ({hint}) ").strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self.output_func("Please answer y or n")

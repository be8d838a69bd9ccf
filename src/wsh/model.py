# src/wsh/model.py
from typing import Optional

from pydantic import BaseModel, Field


class Variable(BaseModel):
    """A shell-local variable created by the 'local' built-in."""
    name: str = Field(description="Unique variable name.")
    value: str = Field(default="", description="The stored (already substituted) value.")

    def format_for_display(self) -> str:
        return f"{self.name}={self.value}"


class RedirectionIntent(BaseModel):
    """
    Describes how the standard streams of a child process should be rebound.
    Produced by a single left-to-right scan of an argument vector.
    """
    input_path: Optional[str] = Field(default=None, description="File to read stdin from.")
    output_path: Optional[str] = Field(default=None, description="File to write stdout to.")
    append: bool = Field(default=False, description="Append to output_path instead of truncating.")
    redirect_stderr: bool = Field(default=False, description="Merge stderr into the redirected stdout.")

"""
Schema definition values rendered to SDL text.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class InputFieldDefinition:
    name: str
    type: str

    def to_sdl(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass
class InputTypeDefinition:
    """A named ``input`` block with ordered ``name: Type`` entries."""

    name: str
    fields: List[InputFieldDefinition] = field(default_factory=list)

    def add_field(self, name: str, type_name: str) -> "InputTypeDefinition":
        self.fields.append(InputFieldDefinition(name, type_name))
        return self

    def field_names(self) -> List[str]:
        return [input_field.name for input_field in self.fields]

    def get_field_type(self, name: str) -> str:
        for input_field in self.fields:
            if input_field.name == name:
                return input_field.type
        raise KeyError(name)

    def to_sdl(self) -> str:
        # GraphQL rejects an empty field block, an input without fields is
        # rendered without braces.
        if not self.fields:
            return f"input {self.name}"
        body = "\n".join(f"  {input_field.to_sdl()}" for input_field in self.fields)
        return f"input {self.name} {{\n{body}\n}}"


@dataclass(frozen=True)
class ArgumentDefinition:
    name: str
    type: str

    def to_sdl(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass
class MutationDefinition:
    """One field of the root ``Mutation`` type."""

    name: str
    arguments: List[ArgumentDefinition] = field(default_factory=list)
    return_type: str = ""

    def to_sdl(self) -> str:
        args = ", ".join(argument.to_sdl() for argument in self.arguments)
        if args:
            return f"{self.name}({args}): {self.return_type}"
        return f"{self.name}: {self.return_type}"

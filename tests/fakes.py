import uuid


class FakeConsole:
    """Scripted console: replays `inputs` in order and records every line written.

    An exception class or instance among the inputs is raised at that prompt.
    """

    def __init__(self, inputs):
        self.inputs = list(inputs)
        self.prompts = []
        self.lines = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self.inputs:
            raise EOFError
        value = self.inputs.pop(0)
        if isinstance(value, BaseException) or (
            isinstance(value, type) and issubclass(value, BaseException)
        ):
            raise value
        return value

    read_secret = read

    def write(self, text=""):
        self.lines.append(text)

    @property
    def output(self):
        return "\n".join(self.lines)


def unique_name(prefix="user"):
    return f"{prefix}_{uuid.uuid4().hex[:8]}"

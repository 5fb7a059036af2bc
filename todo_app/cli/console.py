import getpass


class Console:
    """Line-based terminal I/O used by the menus."""

    def read(self, prompt: str) -> str:
        return input(prompt)

    def read_secret(self, prompt: str) -> str:
        return getpass.getpass(prompt)

    def write(self, text: str = "") -> None:
        print(text)

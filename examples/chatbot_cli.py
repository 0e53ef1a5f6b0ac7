from __future__ import annotations

import sys

from ernie_llm import ErnieError, LogHandler, get_llm
from ernie_llm.utils.logger import setup_logger


def _print_chunk(chunk: str) -> None:
    sys.stdout.write(chunk)
    sys.stdout.flush()


def main():
    log = setup_logger(level="WARNING")
    llm = get_llm(callbacks_handler=LogHandler(log))
    print("Chatbot ready. Type /quit to exit. Examples:")
    print("  /model ERNIE-Bot-turbo")
    print("  Tell me a joke")

    model = None
    while True:
        user_input = input("you> ").strip()
        if user_input.lower() in {"/quit", "quit", "exit"}:
            break
        if not user_input:
            continue

        if user_input.startswith("/model "):
            model = user_input[len("/model "):].strip() or None
            print("bot> model set to", model or "default")
            continue

        sys.stdout.write("bot> ")
        try:
            llm.call(user_input, model=model, streaming_func=_print_chunk)
        except ErnieError as exc:
            sys.stdout.write(f"Error: {exc}")
        print()


if __name__ == "__main__":
    main()

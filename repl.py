from calculator.config import LOG_LEVEL, PROMPT
from calculator.errors import CalcError
from calculator.logging_config import configure_logging
from calculator.runtime import Calculator

HELP = """Enter an expression to calculate it, e.g. (1 + 2) * 3.
Enter an assignment to assign a value to a variable, e.g. x = 5 ^ 2.
The result of the last expression is available as 'ans'.
Enter 'exit' to exit the program."""


if __name__ == "__main__":
    configure_logging(LOG_LEVEL)
    calculator = Calculator()

    while True:
        print()
        print(f"Last result: {calculator.last_result()}")
        print(f"Variables: {calculator.variables}")
        try:
            code = input(PROMPT).strip()
        except EOFError:
            break

        if code == "exit":
            break
        elif code == "help":
            print(HELP)
            continue
        elif not code:
            continue

        try:
            calculator.execute(code)
        except CalcError as e:
            print(f"Error: {e}")

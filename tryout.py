from calculator.errors import CalcError
from calculator.runtime import Calculator
from calculator.tokenizer import tokenize, untokenize

calculator = Calculator()

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/+2",
    "7/6/2000",
    "5^2",
    "2^3^2",
    "-7 % 3",
    "5/0",
    "a = 1",
    "b = a + 1",
    "c = a + b",
    "var = (1 + 14 * (54^2))",
    "10 / 5/ 2",
    "a = b = 10",
    "1 + 2)",
    "(1 + 2",
    "+5",
    "unknown * 2",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    print(f"tokens: {untokenize(tokenize(code))}")
    try:
        result = calculator.execute(code)
    except CalcError as e:
        print(f"{type(e).__name__}: {e}")
        continue
    print(f"result: {result}")

print("=" * 10)
print(f"variables: {calculator.variables}")

import math
import random
import re
import string
import warnings

from calculator.errors import CalcError
from calculator.evaluator import evaluate_full
from calculator.tokenizer import tokenize

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate_full(tokenize(code))
    except CalcError as e:
        return str(e)


if __name__ == "__main__":
    # no minus: unary minus binds differently here, no caret: power is ** in python
    alphabet = string.digits + ".()+*/% "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"[\d.)]\s*\(|\)\s*[\d.]", code):
            continue  # implicit multiplication is a call in python

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, float) and math.isclose(res_my, float(res_py)):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and "by zero" in res_py and isinstance(res_my, float):
            continue  # python raises where IEEE division gives inf or nan
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")

"""
Print the toy functions' results for fixed inputs.

Run with: python -m arithmetic_toy
"""
from .greeting import greet
from .math_utils import add, subtract


def main():
    print(add(5, 3))  # 8
    print(subtract(10, 4))  # 6
    print(greet("Alice"))  # Hello, Alice!


if __name__ == "__main__":
    main()

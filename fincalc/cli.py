"""Interactive menu-driven financial calculator."""

from __future__ import annotations

import argparse
import enum
import sys
from collections import deque
from typing import Callable, TextIO

from fincalc.formulas import (
    amortization_payment,
    compound_amount,
    future_value,
    present_value,
    simple_interest,
)

MENU = (
    "\n          CALCULADORA FINANCEIRA\n\n"
    "Qual operacao financeira deseja calcular?\n\n"
    "1 = Juros Simples\n2 = Juros Compostos\n"
    "3 = Amortizacao\n4 = Valor Presente\n"
    "5 = Valor Futuro\n6 = Sair\n"
)
EXIT_OPTION = 6
INVALID_OPTION = "Digite uma opcao valida\n"
INVALID_INPUT = "Entrada invalida\n"
UNDEFINED_RESULT = "Calculo indefinido para esses valores\n"


class _Frequency(enum.Enum):
    MONTHLY = 1
    ANNUAL = 2


class _InvalidChoice(Exception):
    """A menu or frequency choice outside the listed options."""


class _InvalidNumber(Exception):
    """Input that could not be read as a number."""


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def next(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        self._pending.clear()

    def wait_line(self) -> None:
        if self._pending:
            self._pending.clear()
        else:
            self._stream.readline()


class Menu:
    """The calculator's interactive loop over the given input and output streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._tokens = _Tokens(stdin)
        self._out = stdout
        self._actions: dict[int, Callable[[], None]] = {
            1: self._simple_interest,
            2: self._compound_interest,
            3: self._amortization,
            4: self._present_value,
            5: self._future_value,
        }

    def run(self) -> None:
        """Show the menu and serve requests until the exit option or end of input."""
        while True:
            self._write(MENU)
            try:
                token = self._tokens.next()
            except EOFError:
                return
            self._tokens.discard_line()
            try:
                option = int(token)
            except ValueError:
                option = None

            if option == EXIT_OPTION:
                self._write("Saindo da calculadora...\n")
                self._tokens.wait_line()
                return

            action = self._actions.get(option)
            if action is None:
                self._write(INVALID_OPTION)
                continue
            try:
                action()
            except EOFError:
                return
            except _InvalidChoice:
                self._write(INVALID_OPTION)
            except _InvalidNumber:
                self._write(INVALID_INPUT)
            except ValueError:
                self._write(UNDEFINED_RESULT)

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _ask_float(self, prompt: str) -> float:
        self._write(prompt)
        try:
            return float(self._tokens.next())
        except ValueError as exc:
            raise _InvalidNumber from exc

    def _ask_int(self, prompt: str) -> int:
        self._write(prompt)
        try:
            return int(self._tokens.next())
        except ValueError as exc:
            raise _InvalidNumber from exc

    def _ask_frequency(self, question: str) -> _Frequency:
        choice = self._ask_int(f"{question}\n1 = Mensais\n2 = Anuais\n")
        try:
            return _Frequency(choice)
        except ValueError as exc:
            raise _InvalidChoice from exc

    def _percent_rate_and_periods(self, question: str) -> tuple[float, int]:
        """Read a percent rate, frequency and period, normalised to months."""
        rate = self._ask_float("Qual a taxa de juros?\n")
        frequency = self._ask_frequency(question)
        if frequency is _Frequency.MONTHLY:
            periods = self._ask_int("Digite o periodo em MESES\n")
            return rate, periods
        years = self._ask_int("Digite o periodo em ANOS\n")
        return rate / 12, years * 12

    def _simple_interest(self) -> None:
        capital = self._ask_float("Qual o valor da capital?\n")
        rate, periods = self._percent_rate_and_periods("Os juros sao mensais ou anuais")
        total = simple_interest(capital, rate, periods) + capital
        self._write(f"Valor com juros = R${total:.2f}\n")

    def _compound_interest(self) -> None:
        capital = self._ask_float("Qual o valor da capital?\n")
        rate, periods = self._percent_rate_and_periods("Os juros sao mensais ou anuais?")
        total = compound_amount(capital, rate, periods)
        self._write(f"Valor com juros = R${total:.2f}\n")

    def _amortization(self) -> None:
        principal = self._ask_float("Qual o valor financiado?\n")
        frequency = self._ask_frequency("Os juros sao mensais ou anuais?")
        if frequency is _Frequency.MONTHLY:
            rate = self._ask_float("Qual a taxa de juros MENSAL?\n")
            if rate <= 0:
                self._write("A taxa de juros nao pode ser zero\n")
                return
            periods = self._ask_int("Digite o periodo em MESES\n")
            rate /= 100
        else:
            rate = self._ask_float("Qual a taxa de juros ANUAL?\n")
            periods = self._ask_int("Digite o periodo em ANOS\n") * 12
            rate = rate / 100 / 12
        payment = amortization_payment(principal, rate, periods)
        self._write(f"Parcela = {payment:.2f}\n")

    def _present_value(self) -> None:
        amount = self._ask_float("Digite o valor futuro\n")
        frequency = self._ask_frequency("Os juros sao mensais ou anuais?")
        if frequency is _Frequency.MONTHLY:
            rate = self._ask_float("Qual a taxa de juros MENSAL?\n")
            periods = self._ask_int("Digite o periodo em MESES\n")
            rate /= 100
        else:
            periods = self._ask_int("Digite o periodo em ANOS\n") * 12
            rate = self._ask_float("Digite a taxa de juros ANUAL\n") / 100 / 12
        value = present_value(amount, rate, periods)
        self._write(f"O valor presente liquido e de R${value:.2f}\n")

    def _future_value(self) -> None:
        amount = self._ask_float("Digite o valor presente\n")
        frequency = self._ask_frequency("Os juros sao mensais ou anuais?")
        if frequency is _Frequency.MONTHLY:
            rate = self._ask_float("Qual a taxa de juros MENSAL?\n")
            periods = self._ask_int("Digite o periodo em MESES\n")
            rate /= 100
        else:
            rate = self._ask_float("Qual a taxa de juros ANUAL?\n") / 100 / 12
            periods = self._ask_int("Digite o periodo em ANOS\n") * 12
        value = future_value(amount, rate, periods)
        self._write(f"O valor futuro do seu investimento e de R${value:.2f}\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive calculator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="fincalc",
        description="Interactive financial calculator.",
    )
    parser.parse_args(argv)
    Menu(sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
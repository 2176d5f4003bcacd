# fincalc

A small financial calculator for the terminal. The formulas are also
available as a Python library.

It computes:

1. Simple interest (amount with interest)
2. Compound interest (amount with interest)
3. Amortization (fixed Price-table instalment)
4. Present value
5. Future value

## Installation

```
pip install .
```

## Interactive use

```
fincalc
```

The command takes no options other than `--help`. The menu and prompts
are in Portuguese. Pick an operation by number and answer the prompts:
the value, whether the rate is monthly (`1`) or yearly (`2`), the rate
in percent, and the period. The order of the questions depends on the
operation; each prompt says what it expects. Results are printed with
two decimals.

Yearly inputs are converted to months: the period is multiplied by 12
and the rate divided by 12.

Other behaviour:

- An option outside the menu, or a frequency other than `1` or `2`,
  prints `Digite uma opcao valida` and shows the menu again.
- A value that is not a number prints `Entrada invalida`.
- For amortization with a monthly rate, a rate of zero or less prints
  `A taxa de juros nao pode ser zero`.
- A calculation that is undefined for the given values (for example an
  amortization with a zero yearly rate or zero periods) prints
  `Calculo indefinido para esses valores`.
- Option `6` prints `Saindo da calculadora...` and waits for Enter
  before closing. End of input also closes the calculator.

Example session for compound interest on 1000 at 1% a month over
12 months:

```
2
1000
1
1
12
```

prints `Valor com juros = R$1126.83`.

## Library use

```python
from fincalc.formulas import (
    simple_interest,
    compound_amount,
    amortization_payment,
    present_value,
    future_value,
)

simple_interest(1000, 1, 12)          # interest only, rate in percent
compound_amount(1000, 1, 12)          # amount, rate in percent
amortization_payment(1000, 0.01, 12)  # instalment, rate as a fraction
present_value(1126.83, 0.01, 12)      # rate as a fraction
future_value(1000, 0.01, 12)          # rate as a fraction
```

`simple_interest` and `compound_amount` take the rate in percent. The
other three take it as a fraction (`0.01` for 1%).

`amortization_payment` raises `ValueError` when `(1 + rate) ** periods`
equals one, that is for a zero rate or zero periods. `present_value`
raises `ValueError` when the discount factor is zero.

You can also drive the menu from code with any text streams through
`fincalc.cli.Menu`:

```python
import io
from fincalc.cli import Menu

out = io.StringIO()
Menu(io.StringIO("5\n1000\n1\n1\n12\n6\n\n"), out).run()
print(out.getvalue())
```

## What it does not do

fincalc keeps no history and saves nothing: each result is only
printed. Calculations cannot be given as command-line arguments; the
`fincalc` command is interactive only, and scripted use goes through
the library functions or `Menu`.

## Tests

```
pip install .[test]
pytest
```
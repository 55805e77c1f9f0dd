# numdrills

Classic beginner number exercises as one small Python library with no
dependencies: digit manipulation, divisors and primes, number sequences,
text patterns, simple classifications and array searches. Every exercise is
a function that takes its inputs as arguments and returns its answer.

## Installation

```
pip install numdrills
```

To run the test suite:

```
pip install "numdrills[test]"
pytest
```

## Modules

### `numdrills.digits`

Integer division and remainder here truncate toward zero, so negative numbers
give negative digits.

- `first_digit(n)`, `last_digit(n)`, `sum_first_last(n)`
- `digit_sum(n)`, `digit_product(n)` (1 for zero), `count_digits(n)` (0 for zero)
- `count_evenly_dividing_digits(n)`: non-zero digits that divide `n` exactly
- `reverse_digits(n)`, and `reverse_int32(n)`, which returns 0 when the
  reversed value would leave the signed 32-bit range
- `is_palindrome(n)`
- `digits_in_words(n)`: a list such as `["One", "Two", "Three"]`; trailing
  zeros are dropped and negative numbers give an empty list
- `swap_first_last_digits(n)`
- `is_armstrong(n)` (raises `ValueError` for negative numbers), `is_strong(n)`

### `numdrills.divisors`

- `factors(n)`, `hcf(a, b)`, `lcm(a, b)` (raises `ValueError` if either is zero)
- `is_perfect(n)`, `perfect_numbers(limit)`
- `is_prime(n)`, `prime_factors(n)` (distinct primes), `primes_up_to(limit)`,
  `prime_sum(limit)`
- `sum_of_divisors(n)`: the sum of the divisor sums of 1 to `n`
- `divisibility_by_5_and_11(n)`, returning a `Divisibility` member:
  `BOTH`, `ONLY_5`, `ONLY_11` or `NEITHER`

### `numdrills.sequences`

- `ascii_table()`: `(character, code)` pairs for codes 0 to 256, code 256
  wrapping to the character for 0
- `alphabet()`: `"abcdefghijklmnopqrstuvwxyz"`
- `multiplication_table(n)`: the first ten multiples of `n`
- `even_numbers(limit)`, `odd_numbers(limit)`, `even_sum(limit)`, `natural_sum(limit)`
- `countdown(start)`: `start` down to 1
- `fibonacci(terms)`: the first terms starting from 0
- `factorial(n)`, `power(base, exponent)` (1 for non-positive exponents)
- `water_bottles(num_bottles, num_exchange)`: raises `ValueError` when the
  exchange rate is below 2 and an exchange would be possible

### `numdrills.patterns`

Each function returns the pattern as a list of strings, one per row:
`zero_one_triangle(n)`, `number_half_pyramid(n)`, `butterfly(n)`,
`hollow_rectangle(rows, cols)`, `inverted_number_pattern(n)`,
`inverted_half_pyramid(n)`, `number_pyramid(n)`, `rectangle(rows, cols)`,
`rhombus(n)`, `rotated_half_pyramid(n)`.

```python
from numdrills.patterns import butterfly

print("\n".join(butterfly(3)))
```

### `numdrills.classify`

- `is_leap_year(year)`, `is_valid_triangle(a, b, c)` (three positive angles
  adding up to 180), `is_even(n)`
- `is_alphabet(ch)`, `is_vowel(ch)` (lower-case vowels only),
  `classify_character(ch)` returning a `CharKind`: `ALPHABET`, `DIGIT` or
  `SPECIAL`; these raise `ValueError` unless given exactly one character
- `compare_two(a, b)`: the larger value, or `None` if they are equal
- `greatest_of_three(a, b, c)`: the strictly greatest value, or `None` if the
  largest value is shared
- `month_name(number)` (1 to 12) and `weekday_name(number)` (1 is Monday,
  to 7); both raise `ValueError` outside their range
- `sign(n)`, returning a `Sign`: `NEGATIVE`, `ZERO` or `POSITIVE`
- `voting_status(age)`, returning a `VotingStatus`: `ELIGIBLE` (18 or over),
  `NOT_YET_ELIGIBLE` or `NOT_BORN` (0 or below)
- `quadratic_roots(a, b, c)`: the two real roots truncated to integers, or an
  empty tuple when there are none; raises `ValueError` when `a` is zero

### `numdrills.arrays`

- `min_max(values)`: `(smallest, largest)`; raises `ValueError` when empty
- `linear_search(values, key)`: first index of `key`, or `None`
- `binary_search(values, key)`: index of `key` in an ascending sequence, or `None`

### `numdrills.cli`

- `swap(a, b)`: returns `(b, a)`
- `main(argv=None)`: the command-line entry point described below

## Examples

```python
from numdrills import classify, digits, divisors

digits.digit_sum(1234)        # 10
digits.is_palindrome(12321)   # True
digits.is_armstrong(153)      # True

divisors.hcf(12, 18)          # 6
divisors.lcm(4, 6)            # 12
divisors.is_prime(13)         # True

classify.is_leap_year(2000)   # True
classify.month_name(3)        # "March"
```

## Command line

Installing the package provides the `numdrills` command. It takes two
integers, or prompts for them when none are given, and prints them before
and after swapping:

```
numdrills 3 7
```

```
Number 1 before swapping:3
Number 2 before swapping:7
Number 1 after swaping:7
Number 2 after swaping:3
```

## What it does not do

Apart from the swap command, the exercises have no command-line or
interactive front end: they do not prompt for input or print results
themselves. Call the functions from Python and print what they return.
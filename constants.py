"""
Named exact values. Plain data: rationals as Q, integer magnitudes as int.
"""
from arithmetic import Q

# Large numbers
TRILLION = Q(10**12)
BILLION = Q(10**9)
MILLION = Q(10**6)
THOUSAND = Q(1000)
HUNDRED = Q(100)

# Small integers
DOZEN = Q(12)
TWELVE = DOZEN
TEN = Q(10)
NINE = Q(9)
EIGHT = Q(8)
SEVEN = Q(7)
SIX = Q(6)
FIVE = Q(5)
FOUR = Q(4)
THREE = Q(3)
TWO = Q(2)
ONE = Q(1)
ZERO = Q(0)

# Fractions
THREE_QUARTERS = Q(3, 4)
TWO_THIRDS = Q(2, 3)
HALF = Q(1, 2)
THIRD = Q(1, 3)
QUARTER = Q(1, 4)
FIFTH = Q(1, 5)
SIXTH = Q(1, 6)
SEVENTH = Q(1, 7)
EIGHTH = Q(1, 8)
NINTH = Q(1, 9)
TENTH = Q(1, 10)
TWELFTH = Q(1, 12)
SIXTEENTH = Q(1, 16)
TWENTIETH = Q(1, 20)
TWENTY_FIFTH = Q(1, 25)
HUNDREDTH = Q(1, 100)
THOUSANDTH = Q(1, 1000)
TEN_THOUSANDTH = Q(1, 10**4)
HUNDRED_THOUSANDTH = Q(1, 10**5)
MILLIONTH = Q(1, 10**6)
BILLIONTH = Q(1, 10**9)

# Percentages, stored as ratios (5% == 1/20)
ONE_PERCENT = Q(1, 100)
FIVE_PERCENT = Q(5, 100)
TEN_PERCENT = Q(10, 100)
TWENTY_PERCENT = Q(20, 100)
TWENTY_FIVE_PERCENT = Q(25, 100)
FIFTY_PERCENT = Q(50, 100)
SEVENTY_FIVE_PERCENT = Q(75, 100)
HUNDRED_PERCENT = Q(1)

# Time
HOUR_FRACTION_OF_DAY = Q(1, 24)
MINUTE_FRACTION_OF_HOUR = Q(1, 60)
MINUTE_FRACTION_OF_DAY = Q(1, 1440)
SECOND_FRACTION_OF_HOUR = Q(1, 3600)
SECOND_FRACTION_OF_DAY = Q(1, 86400)

# Integer magnitudes
GOOGOL = 10**100
NONILLION = 10**30
OCTILLION = 10**27
SEPTILLION = 10**24
SEXTILLION = 10**21
QUINTILLION = 10**18
QUADRILLION = 10**15

# Powers of two (binary multiples)
BYTE = 2**8
WORD = 2**16
DOUBLE_WORD = 2**32
QUAD_WORD = 2**64
KILOBYTE = 2**10   # KiB
MEGABYTE = 2**20   # MiB
GIGABYTE = 2**30   # GiB
TERABYTE = 2**40
PETABYTE = 2**50
EXABYTE = 2**60
ZETTABYTE = 2**70
YOTTABYTE = 2**80

# 64-bit signed range, for callers bounding magnitudes
INT64_MAX = 0x7FFFFFFFFFFFFFFF
INT64_MIN = -0x8000000000000000

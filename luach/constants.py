"""Epoch and unit constants for the Hebrew calendar arithmetic."""

# Absolute day of the day before 1 Tishrei of year 1 (Rata Die numbering,
# where 1 January of the proleptic Gregorian year 1 is day 1).
JEWISH_EPOCH = -1373429

CHALAKIM_PER_MINUTE = 18
CHALAKIM_PER_HOUR = 1080
CHALAKIM_PER_DAY = 25920  # 24 * 1080

# 29 days, 12 hours and 793 chalakim: (29 * 24 + 12) * 1080 + 793
CHALAKIM_PER_MONTH = 765433

# Molad BaHaRaD: 1 day, 5 hours and 204 chalakim after the start of Sunday.
CHALAKIM_MOLAD_TOHU = 31524

# Postponement thresholds, in chalakim past the start of the molad day.
MOLAD_ZAKEN_PARTS = 19440  # 18 hours, i.e. noon
GATRAD_PARTS = 9924  # 9 hours, 204 chalakim
BETUTAKFOT_PARTS = 16789  # 15 hours, 589 chalakim

MONTHS_PER_CYCLE = 235  # months in a 19 year Metonic cycle
YEARS_PER_CYCLE = 19

# Jerusalem local mean time is 20 minutes 56.496 seconds ahead of UTC+2.
JERUSALEM_LMT_OFFSET_SECONDS = 20 * 60 + 56.496
JERUSALEM_STANDARD_UTC_OFFSET_HOURS = 2

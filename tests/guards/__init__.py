"""
Guard Test Suite

Guard tests for the Articles Rule. Each guard is tested both ways: it fixes
the words it was added for, and it leaves other words alone.

Guards implemented:
- Guard 1: Exception words invert the first-letter verdict
- Guard 2: Unknown acronyms are judged by their first letter
- Guard 3: 'herb' follows the chosen dialect
"""

"""Solutions for the 2024 Advent of Code puzzles, days 1 to 3, and a day 0 template."""
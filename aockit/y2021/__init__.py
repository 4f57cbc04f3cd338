"""Solutions for the 2021 Advent of Code puzzles, days 2 to 13."""
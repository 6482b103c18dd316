# Red has fallen two squares behind white; both dice remain.
import camelup as cu
from camelup.render import chances_line, ordered

race = cu.parse_race("r,,w")
dice = cu.parse_dice("rw")

result = cu.project(race, dice)
print(chances_line(ordered(result, race)))

counts = cu.count_outcomes(race, dice)
for camel, count in counts.items():
    print(camel.label, count, "of", sum(counts.values()))

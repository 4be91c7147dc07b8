import numpy as np
import matplotlib.pyplot as plt
import sys

# Example of tracking room bookings
# Minutes of a day are booked and cancelled at random, and the free time is plotted at the end

sys.path.append('../')
import rangelist

np.random.seed(0)
day_start = 8 * 60
day_end = 18 * 60
N_bookings = 25
N_cancellations = 8

booked = rangelist.RangeList()

for i in range(N_bookings):
    start = np.random.randint(day_start, day_end - 15)
    length = np.random.choice([15, 30, 45, 60, 90])
    booked.add([start, min(start + length, day_end)])
    print(f'Booking {i: 3}, {len(booked)} blocks booked')

for i in range(N_cancellations):
    start = np.random.randint(day_start, day_end - 15)
    booked.remove([start, start + 15])

# Free time is whatever is left over in the working day
free = rangelist.RangeList([(day_start, day_end)])
for rng in booked:
    free.remove(rng)

print(f'Booked: {booked}')
print(f'Free:   {free}')
print(f'{booked.total()} minutes booked, {free.total()} minutes free')

# Mask over the working day should agree with the ranges
minutes = booked.to_mask(day_end)[day_start:]
print(f'Mask: {minutes.sum()} minutes booked, ranges: {booked.total()} minutes booked')

plt.broken_barh([(r.start / 60, (r.end - r.start) / 60) for r in booked], (1, 0.8), label='Booked')
plt.broken_barh([(r.start / 60, (r.end - r.start) / 60) for r in free], (0, 0.8), color='tab:green', label='Free')
plt.xlabel('Hour of day')
plt.yticks([])
plt.legend()
plt.show(block=True)

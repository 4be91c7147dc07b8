from rangelist.range import Range, validate, as_range, intersects, overlaps, merge, subtract
from rangelist.rangelist import RangeList

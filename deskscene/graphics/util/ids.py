# deskscene/graphics/util/ids.py

# Returned by texture lookups that match nothing. Also the value written to
# the sampler uniform when a draw names an unknown texture.
NOT_FOUND = -1

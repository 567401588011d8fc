def maybe_int(val: float):
    return int(val) if val.is_integer() else val

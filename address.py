def is_power_of_two(n):
    return n > 0 and (n & (n - 1)) == 0


def offset_bits(page_size):
    # Number of low address bits that belong to the in-page offset
    bits = 0
    while page_size > 1:
        page_size >>= 1
        bits += 1
    return bits


def page_number(address, bits):
    return address >> bits


class PageSize:
    def __init__(self, size_bytes):
        if not is_power_of_two(size_bytes):
            raise ValueError(f"Page size must be a positive power of two, got {size_bytes}")
        self.size_bytes = size_bytes
        self.offset_bits = offset_bits(size_bytes)

    def page_of(self, address):
        return page_number(address, self.offset_bits)

    def __repr__(self):
        return f"PageSize({self.size_bytes})"

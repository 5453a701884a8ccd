"""KSUID demo - one thread per id, each encoding then decoding its own KSUID."""

import threading

from config import load_config
from internal.logging import get_logger, LogLevel, StructuredLogger
from utils.ksuid import decode_ksuid, generate_ksuid
from utils.timestamp import format_timestamp


class DemoResult:
    __slots__ = ("index", "ksuid", "original_id", "decoded_id", "timestamp")

    def __init__(self, index, ksuid, original_id, decoded_id, timestamp):
        self.index = index
        self.ksuid = ksuid
        self.original_id = original_id
        self.decoded_id = decoded_id
        self.timestamp = timestamp

    def to_dict(self):
        return {
            "index": self.index,
            "ksuid": self.ksuid,
            "original_id": self.original_id,
            "decoded_id": self.decoded_id,
            "timestamp": format_timestamp(self.timestamp),
        }


def run_demo(base_id, total, generate=generate_ksuid, decode=decode_ksuid):
    """Run `total` threads and return their results ordered by index.

    A thread that fails leaves None in its slot.
    """
    log = get_logger()
    results = [None] * total

    def worker(index):
        current_id = base_id + index
        try:
            ksuid = generate(current_id)
            decoded = decode(ksuid)
        except Exception as exc:
            log.error("ksuid roundtrip fail", error=exc, index=index, id=current_id)
            return
        results[index] = DemoResult(index, ksuid, current_id, decoded.id, decoded.timestamp)
        log.info("ksuid roundtrip", index=index, ksuid=ksuid, id=current_id, decoded_id=decoded.id)

    threads = [threading.Thread(target=worker, args=(i,), name=f"ksuid-{i}") for i in range(total)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    return results


def main():
    config = load_config()
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))

    for result in run_demo(config.demo.base_id, config.demo.total):
        if result is None:
            continue
        print(f"[{result.index}] KSUID: {result.ksuid}")
        print(f"    Original ID: {result.original_id}")
        print(f"    Decoded ID:  {result.decoded_id}")
        print(f"    Timestamp:   {format_timestamp(result.timestamp)}\n")


if __name__ == "__main__":
    main()

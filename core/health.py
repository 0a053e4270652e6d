import asyncio
import os
import time
from enum import Enum

from core.errors import BaseSlugError
from slugs.precision import Precision
from slugs.timestamp import digits_at
from utils.timestamp import format_timestamp, read_clock

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

class CheckResult:
    __slots__ = ("name", "status", "msg")

    def __init__(self, name, status, msg=""):
        self.name = name
        self.status = status
        self.msg = msg

    def to_dict(self):
        return {"name": self.name,
                "status": self.status.value,
                "msg": self.msg}

class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")

    def __init__(self, status, checks, uptime=0):
        self.status = status
        self.checks = checks
        self.uptime = uptime
        self.timestamp = format_timestamp()

    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}

_checker = None

class HealthChecker:
    def __init__(self, ttl=1.0):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._start_time = time.time()

    @property
    def uptime(self):
        return time.time() - self._start_time

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = []
        for name, (check_fn, is_critical) in self._checks.items():
            try:
                result = await asyncio.wait_for(check_fn(), timeout=5)
            except asyncio.TimeoutError:
                result = CheckResult(name, Status.FAIL, "timeout")
            except Exception as exc:
                result = CheckResult(name, Status.FAIL, str(exc))
            results.append((result, is_critical))

        status = Status.OK
        for result, is_critical in results:
            if result.status == Status.FAIL and is_critical:
                status = Status.FAIL
            elif result.status != Status.OK and status == Status.OK:
                status = Status.DEGRADED

        self._cache = HealthReport(status, [result for result, _ in results], now - self._start_time)
        self._cache_time = now
        return self._cache

def get_health_checker():
    global _checker
    if not _checker:
        _checker = HealthChecker()
    return _checker

# Checks
async def check_event_loop():
    await asyncio.sleep(0)
    return CheckResult("loop", Status.OK)

def create_clock_check(clock=read_clock):
    async def check():
        try:
            digits_at(Precision.NANOSECONDS, clock)
        except BaseSlugError as exc:
            return CheckResult("clock", Status.FAIL, exc.message)
        return CheckResult("clock", Status.OK)
    return check

def create_entropy_check(randbytes=os.urandom):
    async def check():
        try:
            data = randbytes(1)
        except (OSError, NotImplementedError) as exc:
            return CheckResult("entropy", Status.FAIL, str(exc))
        if len(data) != 1:
            return CheckResult("entropy", Status.FAIL, "short read")
        return CheckResult("entropy", Status.OK)
    return check

def create_service_check(service, threshold=0.1):
    async def check():
        stats = service.get_stats()
        attempts = stats["total_issued"] + stats["failures"]
        if attempts and stats["failures"] / attempts > threshold:
            return CheckResult("service", Status.DEGRADED, f"{stats['failures']}fail")
        return CheckResult("service", Status.OK, f"{stats['total_issued']}issued")
    return check

def create_logger_check(logger):
    async def check():
        queue_size, max_size = logger.queue.qsize(), logger.queue.maxsize

        if queue_size / max_size > 0.9:
            return CheckResult("log", Status.DEGRADED, f"{queue_size}/{max_size}")

        return CheckResult("log", Status.OK)
    return check

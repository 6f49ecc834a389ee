import platform
import psutil

from cpuapi.schemas.cpu import CpuSnapshot

CPUINFO_PATH = "/proc/cpuinfo"


def logical_cpu_count() -> int:
    return psutil.cpu_count(logical=True) or 1


def _model_name() -> str:
    try:
        with open(CPUINFO_PATH) as f:
            for line in f:
                key, _, value = line.partition(":")
                # x86 calls it "model name", some arm kernels only expose "Processor"/"Hardware"
                if key.strip() in ("model name", "Processor", "Hardware") and value.strip():
                    return value.strip()
    except OSError:
        pass
    return platform.processor() or "unknown"


def _speed_mhz() -> float:
    try:
        freq = psutil.cpu_freq()
    except (OSError, NotImplementedError):
        freq = None
    return freq.current if freq else 0.0


def read_cpu_snapshot() -> CpuSnapshot:
    """Fresh read on every call, nothing here is cached."""
    return CpuSnapshot(
        cores=logical_cpu_count(),
        model=_model_name(),
        speed_mhz=_speed_mhz(),
        architecture=platform.machine(),
        load_average=psutil.getloadavg(),
    )

"""
Utility functions to collect system information for benchmarking reports
"""

import platform
import json
import psutil


def get_cpu_info():
    """Get CPU information"""
    return {
        'brand': platform.processor() or platform.machine(),
        'architecture': platform.machine(),
        'cores': psutil.cpu_count(logical=False) or 1,
        'threads': psutil.cpu_count(logical=True) or 1,
    }


def get_ram_info():
    """Get RAM information"""
    mem = psutil.virtual_memory()
    return {
        'total_gb': round(mem.total / (1024**3), 2),
        'available_gb': round(mem.available / (1024**3), 2),
    }


def get_system_info():
    """Collect the system information attached to every benchmark result"""
    return {
        'os': {
            'name': platform.system(),
            'version': platform.version(),
            'release': platform.release(),
        },
        'cpu': get_cpu_info(),
        'ram': get_ram_info(),
        'python_version': platform.python_version(),
    }


if __name__ == "__main__":
    # Print system info when run directly
    info = get_system_info()
    print(json.dumps(info, indent=2))

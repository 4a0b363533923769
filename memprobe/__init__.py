"""
memprobe: report available system memory using each platform's native counters.
"""

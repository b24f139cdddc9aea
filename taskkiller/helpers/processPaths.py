import os
import psutil

IMAGE_PATH_CAPACITY = 2000  # chars; longer paths come back empty, no retry
PROCESS_QUERY_LIMITED_INFORMATION = 0x00001000

if os.name == "nt":
    import ctypes

    _kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)

    OpenProcess = _kernel32.OpenProcess
    OpenProcess.argtypes = [ctypes.c_uint32, ctypes.c_int, ctypes.c_uint32]
    OpenProcess.restype = ctypes.c_void_p
    CloseHandle = _kernel32.CloseHandle
    CloseHandle.argtypes = [ctypes.c_void_p]
    QueryFullProcessImageNameW = _kernel32.QueryFullProcessImageNameW
    QueryFullProcessImageNameW.argtypes = [ctypes.c_void_p, ctypes.c_uint32, ctypes.c_wchar_p, ctypes.POINTER(ctypes.c_uint32)]
    QueryFullProcessImageNameW.restype = ctypes.c_int


def _windows_image_path(pid: int) -> str | None:
    """QueryFullProcessImageNameW on a limited-information handle."""
    hproc = OpenProcess(PROCESS_QUERY_LIMITED_INFORMATION, 0, pid)
    if not hproc:
        return None
    try:
        size = ctypes.c_uint32(IMAGE_PATH_CAPACITY)
        buf = ctypes.create_unicode_buffer(size.value)
        if not QueryFullProcessImageNameW(hproc, 0, buf, ctypes.byref(size)):
            return None
        return buf.value
    finally:
        CloseHandle(hproc)


def _psutil_image_path(pid: int) -> str | None:
    # psutil reads /proc/<pid>/exe (or the platform equivalent)
    return psutil.Process(pid).exe() or None


def default_resolver():
    """Pick the pid -> executable path resolver for this platform."""
    if os.name == "nt":
        return _windows_image_path
    return _psutil_image_path


def try_get_process_filename(p, resolver=None) -> str:
    """Full on-disk path of p's executable, or '' when it can't be read."""
    resolver = resolver or default_resolver()
    try:
        return resolver(p.pid) or ""
    except Exception:
        return ""

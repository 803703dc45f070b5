import time

__all__ = ["formatdate"]


def formatdate(timeval=None, usegmt=False):
    """Returns a date string as specified by RFC 2822, e.g.:

    Fri, 09 Nov 2001 01:08:47 -0000

    Optional timeval if given is a floating point time value as accepted by
    gmtime(), otherwise the current time is used.

    Optional argument usegmt means that the timezone is written out as
    an ascii string, not numeric one (so "GMT" instead of "+0000"). This
    is needed for HTTP.
    """
    if timeval is None:
        timeval = time.time()

    tuple_time = time.gmtime(timeval)
    # %a and %b are locale dependent, HTTP wants the English names
    date_str = "%s, %02d %s %04d %02d:%02d:%02d" % (
        ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"][tuple_time.tm_wday],
        tuple_time.tm_mday,
        ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
         "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"][tuple_time.tm_mon - 1],
        tuple_time.tm_year,
        tuple_time.tm_hour,
        tuple_time.tm_min,
        tuple_time.tm_sec,
    )
    if usegmt:
        date_str += " GMT"
    else:
        date_str += " +0000"

    return date_str

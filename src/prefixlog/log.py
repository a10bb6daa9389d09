"""Default logger: module-level functions bound to one must_new() Logger.

    from prefixlog import log

    log.info("execution start")
    done = log.info_dur()
    ...
    done("execution time")
"""

from __future__ import annotations

from prefixlog.logger import must_new

_log = must_new()

core = _log.core
unwrap = _log.unwrap
skip = _log.skip
sync = _log.sync

with_ = _log.with_
withf = _log.withf
withw = _log.withw

debug = _log.debug
debugf = _log.debugf
debugw = _log.debugw
debug_dur = _log.debug_dur

info = _log.info
infof = _log.infof
infow = _log.infow
info_dur = _log.info_dur

warn = _log.warn
warnf = _log.warnf
warnw = _log.warnw
warn_dur = _log.warn_dur

error = _log.error
errorf = _log.errorf
errorw = _log.errorw

panic = _log.panic
panicf = _log.panicf
panicw = _log.panicw

fatal = _log.fatal
fatalf = _log.fatalf
fatalw = _log.fatalw

auto_dur = _log.auto_dur

from __future__ import annotations

import unittest

from system_info.exceptions import ProbeDataMissing
from system_info.parsers.cpu_parser import CPUDataParser, CPUInfo
from system_info.parsers.disk_parser import (
    DiskDataParser,
    DiskSample,
    FilesystemInfo,
    aggregate_filesystems,
    parse_mount_table,
)
from system_info.parsers.kstat_parser import KstatDataParser
from system_info.parsers.memory_parser import MemoryDataParser, MemorySample
from system_info.parsers.uptime_parser import UptimeDataParser

CPUINFO = """processor\t: 0
vendor_id\t: GenuineIntel
model name\t: Intel(R) Core(TM) i7-8550U CPU @ 1.80GHz
cpu MHz\t\t: 1992.000
cache size\t: 8192 KB

processor\t: 1
vendor_id\t: GenuineIntel
model name\t: Some Other Core
cpu MHz\t\t: 800.000
"""

MEMINFO = """MemTotal:        8000000 kB
MemFree:         1000000 kB
MemAvailable:    5000000 kB
Buffers:          500000 kB
SwapCached:         9999 kB
Cached:          2500000 kB
"""

VM_STAT = """Mach Virtual Memory Statistics: (page size of 16384 bytes)
Pages free:                              100000.
Pages active:                            400000.
Pages inactive:                          200000.
Pages speculative:                        10000.
Pages wired down:                        300000.
"""

VMSTAT_SUMMARY = """     4096 bytes per page
        8 page colors
   262144 pages managed
    65536 pages free
   131072 pages active
    65536 pages inactive
"""

DF_OUTPUT = """Filesystem 1024-blocks Used Available Capacity Mounted on
/dev/ada0p2 1000000 250000 750000 25% /
tmpfs 2000000 1000000 1000000 50% /tmp
devfs 1 1 0 100% /dev
"""


class CPUParserTests(unittest.TestCase):
    def test_cpuinfo_first_entry_wins(self) -> None:
        info = CPUDataParser().parse({"cpuinfo_output": CPUINFO})
        self.assertEqual(info, CPUInfo("Intel(R) Core(TM) i7-8550U CPU @ 1.80GHz", 1992.0))

    def test_cpuinfo_strips_line_terminators(self) -> None:
        info = CPUDataParser().parse({"cpuinfo_output": "model name\t: Xeon  \r\ncpu MHz\t: 2000\r\n"})
        self.assertEqual(info.model, "Xeon")
        self.assertEqual(info.mhz, 2000.0)

    def test_cpuinfo_without_clock(self) -> None:
        info = CPUDataParser().parse({"cpuinfo_output": "model name\t: ARMv8 Processor rev 4\n"})
        self.assertIsNone(info.mhz)

    def test_cpuinfo_without_model_is_missing_data(self) -> None:
        with self.assertRaises(ProbeDataMissing):
            CPUDataParser().parse({"cpuinfo_output": "processor\t: 0\nBogoMIPS\t: 38.40\n"})

    def test_sysctl_clock_in_hz(self) -> None:
        info = CPUDataParser().parse({"model": "Xeon\n", "clock_hz": "2400000000"})
        self.assertEqual(info, CPUInfo("Xeon", 2400.0))

    def test_sysctl_clock_in_mhz(self) -> None:
        info = CPUDataParser().parse({"model": "Xeon", "clock_mhz": "2400"})
        self.assertEqual(info.mhz, 2400.0)

    def test_missing_model(self) -> None:
        with self.assertRaises(ProbeDataMissing):
            CPUDataParser().parse({"model": "", "clock_mhz": "2400"})


class MemoryParserTests(unittest.TestCase):
    def test_meminfo_used_subtracts_free_buffers_cached(self) -> None:
        sample = MemoryDataParser().parse({"meminfo_output": MEMINFO})
        self.assertEqual(sample, MemorySample(total_kb=8000000, used_kb=4000000))

    def test_meminfo_negative_used_is_clamped(self) -> None:
        text = "MemTotal: 1000 kB\nMemFree: 900 kB\nBuffers: 200 kB\nCached: 300 kB\n"
        sample = MemoryDataParser().parse({"meminfo_output": text})
        self.assertEqual(sample, MemorySample(total_kb=1000, used_kb=0))

    def test_meminfo_zero_total_is_missing_data(self) -> None:
        with self.assertRaises(ProbeDataMissing):
            MemoryDataParser().parse({"meminfo_output": "MemTotal: 0 kB\nMemFree: 0 kB\n"})

    def test_meminfo_without_total(self) -> None:
        with self.assertRaises(ProbeDataMissing):
            MemoryDataParser().parse({"meminfo_output": "MemFree: 100 kB\n"})

    def test_vm_stat(self) -> None:
        sample = MemoryDataParser().parse({
            "vm_stat_output": VM_STAT,
            "total_bytes": str(16384 * 1000000),
        })
        # (1000000 - 100000 - 200000) pages of 16 KB
        self.assertEqual(sample, MemorySample(total_kb=16000000, used_kb=11200000))

    def test_vmstat_summary(self) -> None:
        sample = MemoryDataParser().parse({"vmstat_summary_output": VMSTAT_SUMMARY})
        self.assertEqual(sample, MemorySample(total_kb=1048576, used_kb=524288))

    def test_page_counts_with_total_bytes(self) -> None:
        sample = MemoryDataParser().parse({
            "total_bytes": "8589934592",
            "free_pages": "1048576",
            "inactive_pages": "524288",
            "cache_pages": None,
            "page_size": 4096,
        })
        self.assertEqual(sample, MemorySample(total_kb=8388608, used_kb=2097152))

    def test_page_counts_with_total_pages(self) -> None:
        sample = MemoryDataParser().parse({
            "total_pages": "2097152",
            "free_pages": "1048576",
            "page_size": 4096,
        })
        self.assertEqual(sample, MemorySample(total_kb=8388608, used_kb=4194304))

    def test_unknown_source(self) -> None:
        with self.assertRaises(ProbeDataMissing):
            MemoryDataParser().parse({})


class DiskParserTests(unittest.TestCase):
    def test_df_output_counts_only_real_devices(self) -> None:
        sample = DiskDataParser().parse({
            "df_output": DF_OUTPUT,
            "device_prefixes": ("/dev/", "ROOT"),
        })
        self.assertEqual(sample, DiskSample(total_bytes=1000000 * 1024, used_bytes=250000 * 1024))

    def test_filter_keeps_real_device_and_drops_pseudo_mount(self) -> None:
        filesystems = [
            FilesystemInfo("/dev/sda1", "/", 4000, 1000),
            FilesystemInfo("tmpfs", "/tmp", 9000, 9000),
        ]
        self.assertEqual(
            aggregate_filesystems(filesystems, ("/dev/", "ROOT")),
            DiskSample(total_bytes=4000, used_bytes=3000),
        )

    def test_root_marker_counts_as_real_device(self) -> None:
        filesystems = [FilesystemInfo("ROOT", "/", 100, 40)]
        self.assertEqual(aggregate_filesystems(filesystems, ("/dev/", "ROOT")).total_bytes, 100)

    def test_unfiltered_sums_every_mount(self) -> None:
        filesystems = [
            FilesystemInfo("/dev/sda1", "/", 4000, 1000),
            FilesystemInfo("tmpfs", "/tmp", 9000, 9000),
        ]
        self.assertEqual(
            DiskDataParser().parse({"filesystems": filesystems}),
            DiskSample(total_bytes=13000, used_bytes=3000),
        )

    def test_no_capacity_is_missing_data(self) -> None:
        with self.assertRaises(ProbeDataMissing):
            DiskDataParser().parse({"filesystems": []})

    def test_df_block_size_from_header(self) -> None:
        output = "Filesystem 512-blocks Used Available Capacity Mounted on\n/dev/da0 100 50 50 50% /\n"
        sample = DiskDataParser().parse({"df_output": output, "device_prefixes": ("/dev/",)})
        self.assertEqual(sample, DiskSample(total_bytes=51200, used_bytes=25600))

    def test_mount_table(self) -> None:
        text = (
            "/dev/sda1 / ext4 rw,relatime 0 0\n"
            "proc /proc proc rw 0 0\n"
            "/dev/sdb1 /mnt/my\\040disk ext4 rw 0 0\n"
        )
        entries = parse_mount_table(text)
        self.assertEqual([e.mount_point for e in entries], ["/", "/proc", "/mnt/my disk"])
        self.assertEqual(entries[1].device, "proc")
        self.assertEqual(entries[0].fs_type, "ext4")

    def test_solaris_mnttab(self) -> None:
        entries = parse_mount_table("rpool/ROOT/s11\t/\tzfs\trw\t1697600000\n")
        self.assertEqual(entries[0].device, "rpool/ROOT/s11")
        self.assertEqual(entries[0].mount_point, "/")


class UptimeParserTests(unittest.TestCase):
    def test_proc_uptime(self) -> None:
        self.assertEqual(UptimeDataParser().parse({"proc_uptime_output": "3661.52 12345.00\n"}), 3661)

    def test_boottime_struct(self) -> None:
        raw = {"boot_time": "{ sec = 1000, usec = 5 } Thu Jan  1 00:16:40 1970", "now": 4661}
        self.assertEqual(UptimeDataParser().parse(raw), 3661)

    def test_boottime_epoch(self) -> None:
        raw = {"boot_time": "1000", "now": 1000 + 604800}
        self.assertEqual(UptimeDataParser().parse(raw), 604800)

    def test_boot_time_in_future_is_zero(self) -> None:
        self.assertEqual(UptimeDataParser().parse({"boot_time": 5000, "now": 1000}), 0)

    def test_unparseable_boot_time(self) -> None:
        with self.assertRaises(ProbeDataMissing):
            UptimeDataParser().parse({"boot_time": "yesterday", "now": 1000})

    def test_empty_counter(self) -> None:
        with self.assertRaises(ProbeDataMissing):
            UptimeDataParser().parse({"proc_uptime_output": ""})


class KstatParserTests(unittest.TestCase):
    def test_parse_statistics(self) -> None:
        output = (
            "cpu_info:0:cpu_info0:brand\tIntel(r) Xeon(r) CPU E5-2670 0 @ 2.60GHz\n"
            "cpu_info:0:cpu_info0:current_clock_Hz\t2600000000\n"
        )
        stats = KstatDataParser().parse({"kstat_output": output})
        self.assertEqual(stats["brand"], "Intel(r) Xeon(r) CPU E5-2670 0 @ 2.60GHz")
        self.assertEqual(stats["current_clock_Hz"], "2600000000")

    def test_missing_output(self) -> None:
        with self.assertRaises(ProbeDataMissing):
            KstatDataParser().parse({})


if __name__ == "__main__":
    unittest.main()

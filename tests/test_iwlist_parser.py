"""Unit tests for the Linux iwlist parser."""

import pytest

from wifiscanner.errors import FailedToParse
from wifiscanner.models import WiFiAccessPoint
from wifiscanner.parsers.iwlist import parse_iwlist_scan


class TestQualityFormat:
    """Tests for output reporting 'Quality=N/70  Signal level=-N dBm'."""

    @pytest.fixture
    def output(self, read_fixture):
        return read_fixture('iwlist', 'iwlist01_ubuntu1404.txt')

    def test_fixture_records(self, output):
        """Test first and last networks from captured output."""
        result = parse_iwlist_scan(output)

        assert result[0] == WiFiAccessPoint(
            mac='00:35:1A:6F:0F:40',
            ssid='TEST-Wifi',
            channel='6',
            signal_level='-72',
            security='',
        )
        assert result[28] == WiFiAccessPoint(
            mac='00:F2:8B:8F:58:77',
            ssid='<hidden>',
            channel='11',
            signal_level='-71',
            security='',
        )

    def test_one_network_per_cell(self, output):
        """Test each Cell block yields exactly one network."""
        assert len(parse_iwlist_scan(output)) == 29

    def test_five_ghz_channel(self, output):
        """Test multi-digit channels from the Frequency line."""
        result = parse_iwlist_scan(output)

        assert result[3].channel == '36'
        assert result[19].channel == '149'

    def test_idempotent(self, output):
        """Test parsing the same text twice gives the same result."""
        assert parse_iwlist_scan(output) == parse_iwlist_scan(output)


class TestPercentFormat:
    """Tests for output reporting 'Signal level=N/100'."""

    @pytest.fixture
    def output(self, read_fixture):
        return read_fixture('iwlist', 'iwlist02_raspi.txt')

    def test_fixture_records(self, output):
        """Test first and third networks from captured output."""
        result = parse_iwlist_scan(output)

        assert result[0] == WiFiAccessPoint(
            mac='D4:D1:84:50:76:45',
            ssid='gsy-97796',
            channel='6',
            signal_level='-76',
            security='',
        )
        assert result[2] == WiFiAccessPoint(
            mac='7C:B7:33:AE:3B:05',
            ssid='visitor-18170',
            channel='9',
            signal_level='-70',
            security='',
        )

    def test_odd_percentage_truncates(self, output):
        """Test 61/100 converts to -70, not -69."""
        result = parse_iwlist_scan(output)

        assert result[3].signal_level == '-70'

    def test_malformed_percentage(self):
        """Test a signal line in neither format raises FailedToParse."""
        output = (
            '          Cell 01 - Address: 00:11:22:33:44:55\n'
            '                    ESSID:"Broken"\n'
            '                    Signal level:unknown\n'
        )

        with pytest.raises(FailedToParse):
            parse_iwlist_scan(output)


class TestCellBlocks:
    """Tests for block splitting and field accumulation."""

    def test_empty_output(self):
        """Test empty output yields no networks."""
        assert parse_iwlist_scan('') == []

    def test_no_cells(self):
        """Test an interface without scan results yields no networks."""
        assert parse_iwlist_scan('lo        Interface doesn\'t support scanning.\n\n') == []

    def test_cell_at_start_of_output(self):
        """Test a delimiter at offset 0 does not produce an error."""
        output = (
            'Cell 01 - Address: 00:11:22:33:44:55\n'
            '          ESSID:"Start"\n'
            '          Frequency:2.412 GHz (Channel 1)\n'
            '          Quality=70/70  Signal level=-40 dBm\n'
        )

        assert parse_iwlist_scan(output) == [WiFiAccessPoint(
            mac='00:11:22:33:44:55',
            ssid='Start',
            channel='1',
            signal_level='-40',
        )]

    def test_single_digit_cell_number_not_split(self):
        """Test 'Cell 1' does not match the two-digit delimiter."""
        output = (
            'wlan0     Scan completed :\n'
            '          Cell 1 - Address: 00:11:22:33:44:55\n'
            '                    ESSID:"One"\n'
            '                    Quality=70/70  Signal level=-40 dBm\n'
        )

        assert parse_iwlist_scan(output) == []

    def test_emitted_before_channel_seen(self):
        """Test a network is emitted as soon as ssid, mac and signal are known."""
        output = (
            '          Cell 01 - Address: 00:11:22:33:44:55\n'
            '                    ESSID:"Early"\n'
            '                    Quality=70/70  Signal level=-40 dBm\n'
            '                    Frequency:2.412 GHz (Channel 1)\n'
        )

        result = parse_iwlist_scan(output)

        assert result == [WiFiAccessPoint(
            mac='00:11:22:33:44:55',
            ssid='Early',
            channel='',
            signal_level='-40',
        )]

    def test_fields_reset_after_emit(self):
        """Test a repeated ESSID and signal in one block do not reuse the mac."""
        output = (
            '          Cell 01 - Address: 00:11:22:33:44:55\n'
            '                    ESSID:"First"\n'
            '                    Quality=70/70  Signal level=-40 dBm\n'
            '                    ESSID:"Second"\n'
            '                    Quality=70/70  Signal level=-41 dBm\n'
        )

        result = parse_iwlist_scan(output)

        assert len(result) == 1
        assert result[0].ssid == 'First'

    def test_missing_mac(self):
        """Test a cell without a readable address is not emitted."""
        output = (
            '          Cell 01 - Address: not-a-mac\n'
            '                    ESSID:"NoMac"\n'
            '                    Quality=70/70  Signal level=-40 dBm\n'
        )

        assert parse_iwlist_scan(output) == []

    def test_empty_essid_not_emitted(self):
        """Test a hidden network with an empty ESSID is skipped."""
        output = (
            '          Cell 01 - Address: 00:11:22:33:44:55\n'
            '                    ESSID:""\n'
            '                    Quality=70/70  Signal level=-40 dBm\n'
        )

        assert parse_iwlist_scan(output) == []

    def test_essid_containing_colon(self):
        """Test everything after the first colon is the SSID."""
        output = (
            '          Cell 01 - Address: 00:11:22:33:44:55\n'
            '                    ESSID:"cafe:guest"\n'
            '                    Quality=70/70  Signal level=-40 dBm\n'
        )

        assert parse_iwlist_scan(output)[0].ssid == 'cafe:guest'

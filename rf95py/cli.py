"""
CLI REPL (Read-Eval-Print Loop) for rf95py.

Provides an interactive terminal for an rf95modem: tune, transmit,
listen and send raw AT commands.
"""

import sys
import logging
from typing import Optional

from .modem import RF95Modem
from .version import __version__
from .types import LoRaChannel, MODEM_PRESETS
from .parsers import decode_hex
from .exceptions import RF95Error


class RF95CLI:
    """Interactive rf95modem REPL."""

    def __init__(self, port: str, baudrate: int = 115200):
        """
        Initialize CLI.

        Args:
            port: Serial port path
            baudrate: Baud rate
        """
        self.port = port
        self.baudrate = baudrate
        self.modem: Optional[RF95Modem] = None
        self.rx_count = 0

    def run(self):
        """Run the REPL."""
        print(f"rf95py CLI v{__version__}")
        print(f"Connecting to {self.port} at {self.baudrate} baud...")
        print("Type 'help' for commands, 'quit' to exit\n")

        try:
            self.modem = RF95Modem(port=self.port, baudrate=self.baudrate)
            self.modem.open()

            print("Connected!\n")

            while True:
                try:
                    line = input("> ").strip()

                    if not line:
                        continue

                    cmd, _, arg = line.partition(" ")
                    cmd = cmd.lower()
                    arg = arg.strip()

                    if cmd in ("quit", "exit", "q"):
                        break
                    elif cmd.upper().startswith("AT"):
                        self._send_command(line)
                    else:
                        self._dispatch(cmd, arg)

                except KeyboardInterrupt:
                    print("\nUse 'quit' to exit")
                    continue
                except EOFError:
                    break

        except RF95Error as e:
            print(f"\nError: {e}")
            return 1
        except Exception as e:
            print(f"\nUnexpected error: {e}")
            logging.exception("CLI error")
            return 1
        finally:
            if self.modem:
                print("\nClosing connection...")
                self.modem.close()
                print("Goodbye!")

        return 0

    def _dispatch(self, cmd: str, arg: str):
        """Run one REPL command."""
        handlers = {
            "help": lambda: self._print_help(),
            "info": lambda: self._show_modem_info(),
            "channels": lambda: self._show_channels(),
            "freq": lambda: self.modem.set_frequency(float(arg)),
            "channel": lambda: self.modem.set_channel(LoRaChannel[arg.upper()]),
            "mode": lambda: self.modem.set_mode(int(arg)),
            "rx": lambda: self._set_rx(arg),
            "tx": lambda: self._transmit(arg.encode("utf-8")),
            "txhex": lambda: self._transmit(decode_hex(arg)),
            "listen": lambda: self._listen(),
        }

        handler = handlers.get(cmd)
        if handler is None:
            print(f"Unknown command: {cmd} (type 'help')")
            return

        try:
            handler()
            if cmd in ("freq", "channel", "mode"):
                print("OK")
        except (ValueError, KeyError) as e:
            print(f"Invalid argument for '{cmd}': {e}")
        except RF95Error as e:
            print(f"Error: {e}")

    def _send_command(self, cmd: str):
        """Send raw AT command and display response."""
        try:
            for line in self.modem.send_raw_at(cmd):
                print(line)
        except RF95Error as e:
            print(f"Error: {e}")

    def _set_rx(self, arg: str):
        if arg.lower() not in ("on", "off"):
            raise ValueError("expected 'on' or 'off'")
        self.modem.set_rx_listener(arg.lower() == "on")
        print(f"RX listener {arg.lower()}")

    def _transmit(self, data: bytes):
        sent = self.modem.send_data(data)
        print(f"Sent {sent} bytes")

    def _listen(self):
        """Print received packets until Ctrl-C."""
        print("Listening for packets, Ctrl-C to stop")
        try:
            while True:
                try:
                    packet = self.modem.read_packet()
                except RF95Error as e:
                    print(f"[bad packet] {e}")
                    continue
                self.rx_count += 1
                print(
                    f"[RX {self.rx_count}] rssi={packet.rssi} snr={packet.snr} "
                    f"len={len(packet.data)} data={packet.data!r}"
                )
        except KeyboardInterrupt:
            print()

    def _print_help(self):
        """Print help message."""
        print("""
Available commands:
  <AT command>   - Send raw AT command to modem (e.g., AT+HELP)
  info           - Show modem status
  channels       - List predefined channels
  freq <mhz>     - Set frequency (e.g., freq 868.10)
  channel <name> - Set channel (e.g., channel CH01_868)
  mode <0-3>     - Select modem config preset
  rx on|off      - Enable/disable packet reception
  tx <text>      - Transmit text
  txhex <hex>    - Transmit hex-encoded bytes
  listen         - Print received packets until Ctrl-C
  help           - Show this help message
  quit/exit/q    - Exit CLI
        """)

    def _show_channels(self):
        """List predefined channels."""
        for channel in LoRaChannel:
            print(f"  {channel.name:<10} {channel.frequency:.2f} MHz")

    def _show_modem_info(self):
        """Show modem status."""
        status = self.modem.config()
        preset = MODEM_PRESETS[status.config]

        print(f"\nFirmware: {status.version}")
        if status.features:
            print(f"Features: {' '.join(status.features)}")
        print(f"Config: {status.config.code} ({preset.description})")
        print(f"Max packet size: {status.max_pkt_size}")
        print(f"Frequency: {status.frequency:.2f} MHz")
        print(f"RX listener: {'on' if status.rx_listener else 'off'}")
        print(f"RX good/bad: {status.rx_good}/{status.rx_bad}")
        print(f"TX good: {status.tx_good}")


def main():
    """Main entry point for CLI."""
    import argparse

    parser = argparse.ArgumentParser(
        description="rf95py CLI - Interactive rf95modem terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rf95-cli /dev/ttyUSB0
  rf95-cli /dev/ttyUSB0 --baudrate 9600
  rf95-cli /dev/ttyUSB0 -v
        """
    )

    parser.add_argument(
        "port",
        help="Serial port (e.g., /dev/ttyUSB0, COM3)"
    )
    parser.add_argument(
        "-b", "--baudrate",
        type=int,
        default=115200,
        help="Baud rate (default: 115200)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args()

    # Setup logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format='%(levelname)s: %(message)s'
        )

    cli = RF95CLI(port=args.port, baudrate=args.baudrate)

    return cli.run()


if __name__ == "__main__":
    sys.exit(main())

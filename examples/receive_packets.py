"""
Packet receive example.

Enables the receive listener and prints every packet until Ctrl-C.
"""

from rf95py import RF95Modem, LoRaChannel, ResponseParseError

# Replace with your serial port
PORT = "/dev/ttyUSB0"


def main():
    """Main function."""
    with RF95Modem(port=PORT) as modem:
        modem.set_channel(LoRaChannel.CH01_868)
        modem.set_rx_listener(True)
        print("Listening on 868.10 MHz, Ctrl-C to stop\n")

        try:
            while True:
                try:
                    packet = modem.read_packet()
                except ResponseParseError as e:
                    print(f"Skipping bad line: {e}")
                    continue

                print(f"rssi={packet.rssi} snr={packet.snr} data={packet.data.hex()}")
        except KeyboardInterrupt:
            modem.set_rx_listener(False)


if __name__ == "__main__":
    main()

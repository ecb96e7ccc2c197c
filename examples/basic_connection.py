"""
Basic connection example.

Demonstrates connecting to a modem, showing its status and sending a packet.
"""

from rf95py import RF95Modem, LoRaChannel, ModemConfig

# Replace with your serial port
PORT = "/dev/ttyUSB0"


def main():
    """Main function."""
    print("rf95py - Basic Connection Example\n")

    # Connect to modem using context manager
    # This automatically opens and closes the serial port
    with RF95Modem(port=PORT) as modem:
        print("Connected to modem!\n")

        modem.set_mode(ModemConfig.MEDIUM_BW125_CR45_SF128_CRC)
        modem.set_channel(LoRaChannel.CH01_868)

        print("=== Modem Status ===")
        status = modem.config()
        print(f"Firmware: {status.version}")
        print(f"Config: {status.config.preset.description}")
        print(f"Frequency: {status.frequency:.2f} MHz")
        print(f"Max packet size: {status.max_pkt_size}")

        sent = modem.send_data(b"hello from rf95py")
        print(f"\nSent {sent} bytes")

    print("\nConnection closed.")


if __name__ == "__main__":
    main()

from typing import Optional

from pydantic import AliasChoices, ConfigDict, Field

from pylivebox.codecs import FlexibleInt, LiveboxModel


class GeneralInfo(LiveboxModel):
    """Router identity and firmware data (feature GeneralInfo)."""
    model_config = ConfigDict(protected_namespaces=())

    # Some firmwares spell it ManuFacturer
    manufacturer: str = Field(validation_alias=AliasChoices("Manufacturer", "ManuFacturer"),
                              serialization_alias="Manufacturer")
    model_name: str = Field(alias="ModelName")
    product_class: str = Field(alias="ProductClass")
    serial_number: str = Field(alias="SerialNumber")
    hardware_version: str = Field(alias="HardwareVersion")
    software_version: str = Field(alias="SoftwareVersion")
    manufacturer_oui: Optional[str] = Field(None, alias="ManufacturerOUI")
    description: Optional[str] = Field(None, alias="Description")
    rescue_version: Optional[str] = Field(None, alias="RescueVersion")
    modem_firmware_version: Optional[str] = Field(None, alias="ModemFirmwareVersion")
    enabled_options: Optional[str] = Field(None, alias="EnabledOptions")
    additional_hardware_version: Optional[str] = Field(None, alias="AdditionalHardwareVersion")
    additional_software_version: Optional[str] = Field(None, alias="AdditionalSoftwareVersion")
    spec_version: Optional[str] = Field(None, alias="SpecVersion")
    provisioning_code: Optional[str] = Field(None, alias="ProvisioningCode")
    up_time: FlexibleInt = Field(None, alias="UpTime")  # seconds
    first_use_date: Optional[str] = Field(None, alias="FirstUseDate")
    device_log: Optional[str] = Field(None, alias="DeviceLog")
    vendor_config_file_number_of_entries: Optional[str] = Field(None, alias="VendorConfigFileNumberOfEntries")
    manufacturer_url: Optional[str] = Field(None, alias="ManufacturerURL")
    country: Optional[str] = Field(None, alias="Country")
    number_of_reboots: FlexibleInt = Field(None, alias="NumberOfReboots")
    upgrade_occurred: Optional[bool] = Field(None, alias="UpgradeOccurred")
    reset_occurred: Optional[bool] = Field(None, alias="ResetOccurred")
    restore_occurred: Optional[bool] = Field(None, alias="RestoreOccurred")
    api_version: Optional[str] = Field(None, alias="ApiVersion")
    router_image: Optional[str] = Field(None, alias="RouterImage")
    router_name: Optional[str] = Field(None, alias="RouterName")

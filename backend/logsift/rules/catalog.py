from .markers import MarkerRule

CLASS_NOT_FOUND = "Caused by: java.lang.ClassNotFoundException: "

FABRIC_INTERNAL = MarkerRule(
    name="fabric_internal",
    title="Fabric Internal Access",
    description=(
        "The mod you are using is using fabric internals that are not meant "
        "to be used by anything but the loader itself.\n"
        "Those mods break both on Quilt and with fabric updates.\n"
        "If you're using fabric, downgrade your fabric loader could work, "
        "on Quilt you can try updating to the latest beta version, "
        "but there's nothing much to do unless the mod author stops using them."
    ),
    markers=[
        f"{CLASS_NOT_FOUND}net.fabricmc.fabric.impl",
        f"{CLASS_NOT_FOUND}net.fabricmc.fabric.mixin",
        f"{CLASS_NOT_FOUND}net.fabricmc.fabric.loader.impl",
        f"{CLASS_NOT_FOUND}net.fabricmc.fabric.loader.mixin",
        "org.quiltmc.loader.impl.FormattedException: java.lang.NoSuchMethodError:",
    ],
)

FLATPAK_NVIDIA = MarkerRule(
    name="flatpak_nvidia",
    title="Outdated Nvidia Flatpak Driver",
    description=(
        "The Nvidia driver for flatpak is outdated.\n"
        "Please run `flatpak update` to fix this issue. "
        "If that does not solve it, "
        "please wait until the driver is added to Flathub and run it again."
    ),
    markers=[
        "org.lwjgl.LWJGLException: Could not choose GLX13 config",
        "GLFW error 65545: GLX: Failed to find a suitable GLXFBConfig",
    ],
)

FORGE_JAVA = MarkerRule(
    name="forge_java",
    title="Forge Java Bug",
    description=(
        "Old versions of Forge crash with Java 8u321+.\n"
        "To fix this, update forge to the latest version via the Versions tab\n"
        "(right click on Forge, click Change Version, and choose the latest one)\n"
        "Alternatively, you can download 8u312 or lower. "
        "See [archive](https://github.com/adoptium/temurin8-binaries/releases/tag/jdk8u312-b07)"
    ),
    markers=[
        "java.lang.NoSuchMethodError: sun.security.util.ManifestEntryVerifier.<init>(Ljava/util/jar/Manifest;)V",
    ],
)

INTEL_HD = MarkerRule(
    name="intel_hd",
    title="Intel HD Windows 10",
    description=(
        "Your drivers don't support windows 10 officially\n"
        "See https://prismlauncher.org/wiki/getting-started/installing-java/"
        "#a-note-about-intel-hd-20003000-on-windows-10 for more info"
    ),
    markers=["org.lwjgl.LWJGLException: Pixel format not accelerated"],
)

LWJGL_2_JAVA_9 = MarkerRule(
    name="lwjgl_2_java_9",
    title="Linux: crash with pre-1.13 and Java 9+",
    description=(
        "Using pre-1.13 (which uses LWJGL 2) with Java 9 or later usually causes a crash. "
        "Switching to Java 8 or below will fix your issue.\n"
        "Alternatively, you can use [Temurin](https://adoptium.net/temurin/releases). "
        "However, multiplayer will not work in versions from 1.8 to 1.11.\n"
        "For more information, type `/tag java`."
    ),
    markers=[
        "check_match: Assertion `version->filename == NULL || "
        "! _dl_name_match_p (version->filename, map)' failed!",
    ],
)

MACOS_NS = MarkerRule(
    name="macos_ns",
    title="MacOS NSInternalInconsistencyException",
    description=(
        "You need to downgrade your Java 8 version. "
        "See https://prismlauncher.org/wiki/getting-started/installing-java/#older-minecraft-on-macos"
    ),
    markers=["Terminating app due to uncaught exception 'NSInternalInconsistencyException"],
)

OOM = MarkerRule(
    name="oom",
    title="Out of Memory",
    description="Allocating more RAM to your instance could help prevent this crash.",
    markers=["java.lang.OutOfMemoryError", "-805306369"],
)

OPTINOTFINE = MarkerRule(
    name="optinotfine",
    title="Potential OptiFine Incompatibilities",
    description=(
        "OptiFine is known to cause problems when paired with other mods. "
        "Try to disable OptiFine and see if the issue persists.\n"
        "Check `/tag optifine` for more info & some typically more compatible alternatives you can use."
    ),
    markers=["[✔] OptiFine_", "[✔] optifabric-"],
)

PRE_1_12_NATIVE_TRANSPORT_JAVA_9 = MarkerRule(
    name="pre_1_12_native_transport_java_9",
    title="Linux: broken multiplayer with 1.8-1.11 and Java 9+",
    description=(
        "These versions of Minecraft use an outdated version of Netty which does not properly support Java 9.\n"
        "\n"
        "Switching to Java 8 or below will fix this issue. For more information, type `/tag java`.\n"
        "\n"
        "If you must use a newer version, do the following:\n"
        "- Open `options.txt` (in the main window Edit -> Open .minecraft) and change.\n"
        "- Find `useNativeTransport:true` and change it to `useNativeTransport:false`.\n"
        "Note: whilst Netty was introduced in 1.7, this option did not exist "
        "which is why the issue was not present."
    ),
    markers=[
        "java.lang.RuntimeException: Unable to access address of buffer\n\tat io.netty.channel.epoll",
    ],
)

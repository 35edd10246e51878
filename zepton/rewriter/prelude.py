"""
prelude.py - Trechos Java injetados pela reescrita ZeptoN

Proposito:
    Guardar o texto fixo inserido em toda unidade: imports, bloco de
    suporte em tempo de execucao, ponto de entrada canonico e o epilogo
    que captura excecoes e finaliza o processo.

Notas de implementacao:
    - Nenhum trecho contem quebra de linha; as linhas do corpo original
      mantem sua numeracao no texto gerado.
"""

from __future__ import annotations

CLASS_KEYWORD = "public final class"

IMPORTS = (
    "import java.io.*; "
    "import java.math.*; "
    "import java.net.*; "
    "import java.util.*; "
    " "
)

RUNTIME_SUPPORT = (
    "private final static char[] EMPTY_CHAR = new char[0]; "
    "private final static String EMPTY_STRING = new String(); "
    "private final static char NULL_CHAR = Character.MIN_VALUE; "
    "private static String[] argv = new String[0]; "
    "private final static PrintStream out_str = System.out; "
    "private final static InputStream inp_str = System.in; "
    "private final static PrintStream err_str = System.err; "
    "private final static Console con = System.console(); "
    "private final static Runtime run = Runtime.getRuntime(); "
    "private final static Scanner scan = new Scanner(System.in); "
    "private final static void init(final String[] args){argv=args;}"
    "private final static void deinit(){try{out_str.flush();out_str.close();err_str.flush();err_str.close();inp_str.close();}"
    "catch (Exception ex){err_str.println(ex.getMessage());ex.printStackTrace(err_str);}}"
    # entrada
    "private final static String readLine(final String fmt, final Object... args){if(con==null){return EMPTY_STRING;} return con.readLine(fmt,args);} "
    "private final static char[] readPassword(String fmt,Object... args){if (con==null){return EMPTY_CHAR;} return con.readPassword(fmt,args);} "
    "private final static char[] readPassword(){if(con==null){return EMPTY_CHAR;} return con.readPassword();} "
    "private final static BigDecimal readBigDecimal(){return scan.nextBigDecimal();}"
    "private final static BigInteger readBigInteger(){return scan.nextBigInteger();}"
    "private final static boolean readBoolean(){return scan.nextBoolean();}"
    "private final static byte readByte(){return scan.nextByte();}"
    "private final static int readInt(){return scan.nextInt();}"
    "private final static long readLong(){return scan.nextLong();}"
    "private final static short readShort(){return scan.nextShort();}"
    "private final static double readDouble(){return scan.nextDouble();}"
    "private final static float readFloat(){return scan.nextFloat();}"
    "private final static String readString(){try{return scan.next();}catch (Exception ex){err_str.println(ex.getMessage());ex.printStackTrace(err_str);} return EMPTY_STRING;} "
    "private final static char readChar(){char chr;try{chr = (char) inp_str.read();}catch (Exception ex){chr = NULL_CHAR;} return chr;}"
    "private final static String readLine(){String line = EMPTY_STRING;try{line = scan.nextLine();}catch (Exception ex){line = EMPTY_STRING;} return line;}"
    # saida
    "private final static void printf(final String fmt,final Object... param){out_str.printf(fmt,param);} "
    "private final static void errorf(final String fmt,final Object...param){err_str.printf(fmt,param);}"
    "private final static void print(final char[] param){out_str.print(param);}"
    "private final static void print(final BigDecimal param){out_str.print(param.toPlainString());}"
    "private final static void print(final BigInteger param){out_str.print(param.toString());}"
    "private final static void print(final boolean param){out_str.print(param);}"
    "private final static void print(final byte param){out_str.print(param);}"
    "private final static void print(final char param){out_str.print(param);}"
    "private final static void print(final double param){out_str.print(param);}"
    "private final static void print(final float param){out_str.print(param);}"
    "private final static void print(final int param){out_str.print(param);}"
    "private final static void print(final long param){out_str.print(param);}"
    "private final static void print(final Object param){out_str.print(param);}"
    "private final static void print(final short param){out_str.print(param);}"
    "private final static void print(final String param){out_str.print(param);}"
    "private final static void println(){out_str.println();}"
    "private final static void println(final char[] param){out_str.println(param);} "
    "private final static void println(final BigDecimal param){out_str.println(param.toPlainString());}"
    "private final static void println(final BigInteger param){out_str.println(param.toString());}"
    "private final static void println(final boolean param){out_str.println(param);} "
    "private final static void println(final byte param){out_str.println(param);}"
    "private final static void println(final char param){out_str.println(param);}"
    "private final static void println(final double param){out_str.println(param);}"
    "private final static void println(final float param){out_str.println(param);}"
    "private final static void println(final int param){out_str.println(param);}"
    "private final static void println(final long param){out_str.println(param);}"
    "private final static void println(final Object param){out_str.println(param);}"
    "private final static void println(final short param){out_str.println(param);}"
    "private final static void println(final String param){out_str.println(param);}"
    # ambiente
    "private final static void exit(final int code){run.exit(code);}"
    "private final static void gc(){run.gc();}"
    "private final static long freeMemory(){return run.freeMemory();}"
    "private final static long maxMemory(){return run.maxMemory();}"
    "private final static long totalMemory(){return run.totalMemory();}"
    "private final static long currentTimeMillis(){return System.currentTimeMillis();}"
    "private final static long nanoTime(){return System.nanoTime();}"
    "private final static Locale getLocale(){return scan.locale();}"
    "private final static void arraycopy(final Object src,final int srcPos,Object dst,final int dstPost,final int len){System.arraycopy(src,srcPos,dst,dstPost,len);} "
    "private final static String getenv(final String param){return System.getenv(param);}"
    "private final static int identityHashCode(final Object obj){return System.identityHashCode(obj);}"
    "private final static String getProperty(final String param){return System.getProperty(param);}"
    "private final static Runtime getRuntime(){return run;}"
    "private final static Console console(){return con;}"
    "private final static String[] getArgs(){return argv;}"
    "private final static String toString(final boolean[] param){return Arrays.toString(param);}"
    "private final static String toString(final byte[] param){return Arrays.toString(param);}"
    "private final static String toString(final char[] param){return Arrays.toString(param);}"
    "private final static String toString(final double[] param){return Arrays.toString(param);}"
    "private final static String toString(final float[] param){return Arrays.toString(param);}"
    "private final static String toString(final int[] param){return Arrays.toString(param);}"
    "private final static String toString(final long[] param){return Arrays.toString(param);}"
    "private final static String toString(final short[] param){return Arrays.toString(param);}"
    "private final static String toString(final Object[] param){return Arrays.toString(param);}"
    "private final static String valueOf(final char[] param){return String.valueOf(param);}"
    "private final static void nop(){;}"
    " "
)

RENAMED_ENTRY_POINT = "_$main"

UNCAUGHT_ERROR_FORMAT = "Uncaught ZeptoN Program Exception: '%s' is '%s'.%n"

EPILOGUE = (
    "}catch(Exception _$ex){ "
    f'System.out.printf("{UNCAUGHT_ERROR_FORMAT}", _$ex.getClass().getName(), _$ex.getMessage()); '
    "}finally{ deinit(); System.exit(0);}  } }"
)


def entry_point(program_name: str) -> str:
    """Bloco de suporte + construtor privado + main canonico que abre o try."""
    return (
        f"{RUNTIME_SUPPORT} private {program_name}(){{}} "
        "public static void main(String[] _$args){ try { init(_$args); "
    )
